"""Core domain types, errors, and config helpers."""

from .config_loading import SUPPORTED_CONFIG_SUFFIXES, load_config_mapping
from .errors import InvalidArgumentError, InvalidIndexError
from .game import DOORS, Arrangement, DoorContent, Outcome, Strategy, validate_door

__all__ = [
    "DOORS",
    "SUPPORTED_CONFIG_SUFFIXES",
    "Arrangement",
    "DoorContent",
    "InvalidArgumentError",
    "InvalidIndexError",
    "Outcome",
    "Strategy",
    "load_config_mapping",
    "validate_door",
]
