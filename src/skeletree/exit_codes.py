"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~skeletree.exceptions.SkeletreeError` subclass.
Shell wrappers can branch on the exit code without parsing stderr.

Example::

    $ skeletree tree openapi.yaml --strategy bogus
    $ echo $?
    1   # EXIT_GENERIC_FAILURE -- the folder strategy is not recognised
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred, including configuration errors."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_SPEC_PARSE_ERROR = 7
"""The API document could not be read or parsed."""
