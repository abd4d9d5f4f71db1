"""Core ChainSync processor."""

import asyncio
import time
from datetime import UTC, datetime
from typing import Any, Mapping, Optional, Union

import structlog
from pydantic import BaseModel, ValidationError

from chainsync.config.models import ChainSyncConfig
from chainsync.exceptions import ConfigurationError, WorkUnitError

# Simulated processing time of the work unit, in milliseconds
WORK_UNIT_DELAY_MS = 100

SUCCESS_MESSAGE = "Processing completed successfully"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class ProcessOutput(BaseModel):
    """Output of a completed work unit."""

    processed: int
    status: str = "completed"
    timestamp: str


class ProcessResult(BaseModel):
    """Result of a processing operation."""

    success: bool
    data: Optional[ProcessOutput] = None
    message: str
    timestamp: datetime


class ChainSync:
    """ChainSync processor."""

    def __init__(
        self,
        config: Union[ChainSyncConfig, Mapping[str, Any], None] = None,
        logger: Any = None,
    ):
        """Initialize the processor.

        Args:
            config: Configuration, or a mapping of fields to override on top
                of the defaults.
            logger: Diagnostic sink with an ``info(event, **kw)`` method.
                Defaults to this module's structlog logger.

        Raises:
            ConfigurationError: If the overrides are not a mapping or don't validate.
        """
        if isinstance(config, ChainSyncConfig):
            self._config = config
        elif config is not None and not isinstance(config, Mapping):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(config).__name__}"
            )
        else:
            try:
                self._config = ChainSyncConfig(**dict(config or {}))
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
        if logger is None:
            logger = structlog.get_logger(__name__)
        self.logger = logger
        self._processed = 0

    @property
    def config(self) -> ChainSyncConfig:
        """Effective configuration."""
        return self._config

    async def execute(self) -> ProcessResult:
        """Execute the processor and return the result.

        Never raises for ordinary exceptions; a failing work unit is
        reported through ``ProcessResult.success`` and ``message``.
        """
        start_time = time.monotonic()

        try:
            if self._config.verbose:
                self.logger.info("Initializing ChainSync processor...")

            result = await self._process()

            duration_ms = int((time.monotonic() - start_time) * 1000)

            if self._config.verbose:
                self.logger.info(
                    f"Processing completed in {duration_ms}ms",
                    duration_ms=duration_ms,
                )

            return ProcessResult(
                success=True,
                data=result,
                message=SUCCESS_MESSAGE,
                timestamp=datetime.now(UTC),
            )
        except Exception as e:
            return ProcessResult(
                success=False,
                message=str(e) or UNKNOWN_ERROR_MESSAGE,
                timestamp=datetime.now(UTC),
            )

    async def _process(self) -> ProcessOutput:
        """Run the work unit.

        Returns:
            Output carrying the updated run count.

        Raises:
            WorkUnitError: If the simulated work fails.
        """
        try:
            await self._delay(WORK_UNIT_DELAY_MS)
        except Exception as e:
            raise WorkUnitError(str(e)) from e

        # No await between read and write, so concurrent calls can't lose
        # an increment on a single event loop.
        self._processed += 1

        return ProcessOutput(
            processed=self._processed,
            status="completed",
            timestamp=datetime.now(UTC).isoformat(),
        )

    @staticmethod
    async def _delay(ms: int) -> None:
        await asyncio.sleep(ms / 1000)
