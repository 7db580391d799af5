# topmark:header:start
#
#   project      : Nest
#   file         : exit_codes.py
#   file_relpath : src/nest/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the Nest CLI.

Values follow BSD ``sysexits`` where one fits.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Nest CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid flags or arguments (``EX_USAGE``).
        IO_ERROR (int): A file could not be read (``EX_IOERR``).
        CONFIG_ERROR (int): The configuration file is invalid (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    IO_ERROR = 74
    CONFIG_ERROR = 78
