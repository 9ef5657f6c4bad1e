"""sitefs CLI -- list, copy, empty, remove and watch directory trees."""

from ._helpers import main  # noqa: F401

# Import command modules to register Click commands with the main group.
from . import _basic, _watch  # noqa: F401
