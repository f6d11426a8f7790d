"""Core domain of the cache store: protocols, events, options and exceptions."""

from .protocols import *
from .events import *
from .exceptions import *
from .value_objects import *
