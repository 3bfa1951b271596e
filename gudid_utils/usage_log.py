# usage_log.py
"""
Session usage log shown in the sidebar (data loads, theme changes, chats).
Events are also sent to the module logger.
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsageEvent:
    timestamp: float
    event: str
    details: str

    def display_time(self) -> str:
        return datetime.fromtimestamp(self.timestamp).strftime("%H:%M:%S")


def log_event(events: List[UsageEvent], event: str, details: str,
              timestamp: Optional[float] = None) -> List[UsageEvent]:
    """Return a new event list with this event first (newest first)."""
    entry = UsageEvent(timestamp=timestamp if timestamp is not None else time.time(),
                       event=event, details=details)
    logger.info(f"{event}: {details}")
    return [entry] + list(events)
