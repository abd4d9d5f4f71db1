"""
Exceptions raised by ChainSync.

Every error carries the exit code the ``chainsync`` command returns for it.
Processor runs never raise these to callers of ``execute()``.
"""

from typing import Optional


class ChainSyncError(Exception):
    """
    Root of the ChainSync error hierarchy; the CLI turns it into an exit code.
    """

    def __init__(self, message: str, exit_code: int = 1):
        """
        Initialize the exception.

        Args:
            message: Error message.
            exit_code: Status the ``chainsync`` command exits with.
        """
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigurationError(ChainSyncError):
    """
    Raised when processor settings can't be built.

    Covers missing or unparseable config files, bad ``CHAINSYNC_*`` values
    and invalid overrides passed to ``ChainSync``.
    """

    def __init__(
        self, message: str, config_file: Optional[str] = None, exit_code: int = 2
    ):
        """
        Initialize the exception.

        Args:
            message: Error message.
            config_file: Config file being loaded, if any; appended to the message.
            exit_code: Status the ``chainsync`` command exits with.
        """
        self.config_file = config_file
        if config_file:
            message = f"{message} (config file: {config_file})"
        super().__init__(message, exit_code)


class WorkUnitError(ChainSyncError):
    """
    Raised when the processor's work unit fails unexpectedly.

    ChainSync.execute() never lets this escape; it is turned into a
    failed ProcessResult.
    """

    def __init__(self, message: str, exit_code: int = 3):
        super().__init__(message, exit_code)
