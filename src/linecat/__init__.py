"""linecat: cat with composable line features."""

from .errors import (
    ConfigConflictError,
    DecodeError,
    InputError,
    LinecatError,
    PatternError,
)

__all__ = [
    "ConfigConflictError",
    "DecodeError",
    "InputError",
    "LinecatError",
    "PatternError",
    "__version__",
]

__version__ = "0.4.5"
