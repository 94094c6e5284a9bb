"""
Reader for efpmd input files. The main entry point is :func:`load_config`, which
returns a :obj:`Config` holding all run options and fragments in atomic units.
"""
from efpinput import units
from efpinput import utils
from efpinput.errors import *
from efpinput.options import *
from efpinput.fragments import Fragment
from efpinput.config import Config
from efpinput.parser import *
