# communicator/bot/telemetry.py
import logging
from typing import Dict

from botbuilder.core import NullTelemetryClient

logger = logging.getLogger("communicator.telemetry")


class LoggingTelemetryClient(NullTelemetryClient):
    """
    Telemetry sink that writes custom events to the log.
    Everything other than events is dropped (NullTelemetryClient).
    """

    def track_event(
        self,
        name: str,
        properties: Dict[str, object] = None,
        measurements: Dict[str, object] = None,
    ) -> None:
        logger.info(
            "Telemetry event %s %s",
            name,
            properties or {},
            extra={"event_name": name, "properties": properties or {}, "measurements": measurements or {}},
        )
