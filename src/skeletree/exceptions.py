"""Exception hierarchy for skeletree.

All exceptions inherit from :class:`SkeletreeError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`skeletree.exit_codes`.
The top-level handler in :func:`skeletree.app.main` catches
``SkeletreeError`` and exits with the matching code.

Subclass hierarchy::

    SkeletreeError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- SpecParseError      (exit 7)
    +-- ConfigError         (exit 1)
"""

from skeletree.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
)


class SkeletreeError(Exception):
    """Base exception for all skeletree errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SkeletreeError):
    """Raised for invalid CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class SpecParseError(SkeletreeError):
    """Raised when an API document cannot be read or is not a mapping."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ConfigError(SkeletreeError):
    """Raised for configuration problems (unknown folder strategy, invalid config files)."""

    exit_code = EXIT_GENERIC_FAILURE
