"""Progress checkpoints reported during a conversion.

Converters call these hooks at fixed points. The base class does nothing,
so attaching no observer (or this one) never changes the result.
"""

import logging
from typing import Any


class ConversionObserver:
    """No-op observer; subclass and override the checkpoints you need."""

    def on_start(self, direction: str) -> None:
        pass

    def on_field(self, name: str, value: Any) -> None:
        pass

    def on_animation(self, index: int, name: Any) -> None:
        pass

    def on_complete(self, direction: str) -> None:
        pass

    def on_error(self, direction: str, error: Exception) -> None:
        pass


class LoggingObserver(ConversionObserver):
    """Forward checkpoints to a logger.

    Start and completion are INFO, per-field and per-animation detail is
    DEBUG, failures are ERROR.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("psych2cne.conversion")

    def on_start(self, direction: str) -> None:
        self.logger.info(f"Starting {direction} conversion...")

    def on_field(self, name: str, value: Any) -> None:
        self.logger.debug(f"{name}: {value}")

    def on_animation(self, index: int, name: Any) -> None:
        self.logger.debug(f"Converting animation #{index + 1} ({name})")

    def on_complete(self, direction: str) -> None:
        self.logger.info(f"Finished {direction} conversion")

    def on_error(self, direction: str, error: Exception) -> None:
        self.logger.error(f"{direction} conversion failed: {error}")


NULL_OBSERVER = ConversionObserver()
