from .inputs import *
from .streams import *
