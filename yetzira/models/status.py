"""Status vocabulary - closed enumerations for record labels and categories.

Units use the English labels, containers the Hebrew ones.  Anything else
parses to ``StatusLabel.UNKNOWN`` so classification stays total.
"""

from __future__ import annotations

from enum import Enum


class StatusLabel(str, Enum):
    """Recognised raw status labels, plus an explicit unknown variant."""

    # Unit production statuses
    WAITING = "waiting"
    CUSTOMS = "customs"
    READY_CUT = "ready-cut"
    PRODUCTION = "production"
    COMPLETE = "complete"

    # Container logistics statuses
    IN_TRANSIT = "בדרך"
    IN_CUSTOMS = "במכס"
    IN_WAREHOUSE = "במחסן"

    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | StatusLabel | None) -> StatusLabel:
        """Map a raw label to a member.  Never raises."""
        if isinstance(raw, StatusLabel):
            return raw
        if not isinstance(raw, str):
            return cls.UNKNOWN
        try:
            return cls(raw.strip())
        except ValueError:
            return cls.UNKNOWN


class StatusCategory(str, Enum):
    """Display category a status maps to, used for colouring and filtering."""

    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    IN_PROGRESS = "in-progress"
    SUCCESS = "success"
    NEUTRAL = "neutral"
