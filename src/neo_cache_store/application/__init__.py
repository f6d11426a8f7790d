"""Cache store application layer."""

from .services import *
