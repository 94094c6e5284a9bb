"""
Exceptions raised while loading an input file. Primitive readers never raise,
they report failure with ``None`` and leave the decision to the caller.
"""
from typing import Optional

__all__ = [
    "ConfigError",
    "InputFileError",
    "ConfigFormatError",
    "ConfigValueError",
    "FragmentCountError",
]


class ConfigError(Exception):
    """
    Base class for all fatal input file errors.

    Args:
        message (str): Human readable description of the failing option or construct.
        line_number (int, optional): Line of the input file the error refers to.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number

        if line_number is not None:
            message = "{:s} (line {:d})".format(message, line_number)

        super(ConfigError, self).__init__(message)


class InputFileError(ConfigError):
    pass


class ConfigFormatError(ConfigError):
    pass


class ConfigValueError(ConfigError):
    pass


class FragmentCountError(ConfigError):
    pass
