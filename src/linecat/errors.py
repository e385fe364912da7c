"""Error types shared by the source, pipeline and CLI layers."""


class LinecatError(Exception):
    """Base error. ``exit_code`` is the process status the CLI exits with."""

    exit_code = 1


class InputError(LinecatError):
    """A file (or the terminal) could not be opened or read."""

    exit_code = 1


class ConfigConflictError(LinecatError):
    """Mutually exclusive features were requested together."""

    exit_code = 2


class PatternError(LinecatError):
    """The search pattern is not a valid regular expression."""

    exit_code = 3


class DecodeError(LinecatError):
    """A line is not valid Base64."""

    exit_code = 4


class UserQuit(LinecatError):
    """Operator pressed ``q`` at the pagination prompt."""

    exit_code = 0


__all__ = [
    "ConfigConflictError",
    "DecodeError",
    "InputError",
    "LinecatError",
    "PatternError",
    "UserQuit",
]
