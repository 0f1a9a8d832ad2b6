from collections.abc import Callable
from dataclasses import dataclass

from compliance_audit.logging.logger import Log

ProgressCallback = Callable[[str, int], None]


@dataclass(frozen=True)
class ProgressEvent:
    message: str
    percent: int


class ProgressReporter:
    """Single progress channel for one analysis run.

    Percent values never move backwards: a lower value is reported at the
    last emitted percent instead. Emission must happen on the event loop
    thread; worker threads hand results back before anything is reported.
    """

    def __init__(self, callback: ProgressCallback | None = None) -> None:
        self._callback = callback
        self._percent = 0
        self.history: list[ProgressEvent] = []

    @property
    def percent(self) -> int:
        return self._percent

    def emit(self, message: str, percent: int) -> ProgressEvent:
        """Report a stage transition."""
        clamped = max(self._percent, min(100, max(0, int(percent))))
        self._percent = clamped
        event = ProgressEvent(message=message, percent=clamped)
        self.history.append(event)
        Log.debug(f"Progress {clamped}%: {message}")
        if self._callback is not None:
            self._callback(event.message, event.percent)
        return event

    def sub_stage(self, message: str) -> ProgressEvent:
        """Report a sub-step without advancing the percentage."""
        return self.emit(message, self._percent)
