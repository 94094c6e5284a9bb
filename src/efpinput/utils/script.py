import dataclasses
from typing import Optional, Sequence

import rich
from omegaconf import OmegaConf
from rich.syntax import Syntax
from rich.tree import Tree


__all__ = ["print_config"]


def print_config(config, fields: Optional[Sequence[str]] = None) -> None:
    """Prints content of a loaded config using Rich library and its tree structure.

    Args:
        config (efpinput.Config): Loaded config.
        fields (Sequence[str], optional): Determines which fields from config will be
        printed and in what order. Defaults to all options followed by the fragments.
    """

    style = "dim"
    tree = Tree(
        f":gear: Running with the following config:", style=style, guide_style=style
    )

    config_dict = config.as_dict()

    if fields is None:
        fields = [
            entry.name
            for entry in dataclasses.fields(config)
            if entry.name in config_dict
        ]

    for field in fields:
        branch = tree.add(field, style=style, guide_style=style)

        config_section = config_dict.get(field)
        branch_content = str(config_section)
        if isinstance(config_section, (dict, list)):
            branch_content = OmegaConf.to_yaml(
                OmegaConf.create({field: config_section})
            )

        branch.add(Syntax(branch_content, "yaml"))

    rich.print(tree)
