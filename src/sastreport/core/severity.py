"""Severity scores and SARIF level mapping.

Provides:
- Score: Enum for issue severity/confidence (LOW/MEDIUM/HIGH/UNDEFINED)
- SarifLevel: Enum for SARIF result levels
- get_sarif_level: Map an issue severity to a SARIF level
- sort_issues: Order issues by severity, most severe first
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from sastreport.core.issue import Issue


class Score(str, Enum):
    """Severity or confidence score attached to an issue.

    Any value outside LOW/MEDIUM/HIGH parses as UNDEFINED rather than failing.
    """

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    UNDEFINED = "UNDEFINED"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            upper = value.upper()
            for member in cls:
                if member.value == upper:
                    return member
        return cls.UNDEFINED

    def __str__(self) -> str:
        return self.value


class SarifLevel(str, Enum):
    """SARIF result level.

    From the SARIF 2.1.0 specification:
    - error: the rule was evaluated and a serious problem was found
    - warning: the rule was evaluated and a problem was found
    - note: a minor problem or an opportunity to improve the code was found
    - none: severity does not apply (kind is not "fail")
    """

    NONE = "none"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


_LEVELS = {
    "LOW": SarifLevel.WARNING,
    "MEDIUM": SarifLevel.ERROR,
    "HIGH": SarifLevel.ERROR,
}

_RANK = {
    Score.HIGH: 0,
    Score.MEDIUM: 1,
    Score.LOW: 2,
    Score.UNDEFINED: 3,
}


def get_sarif_level(severity: Score | str | None) -> SarifLevel:
    """Map an issue severity to its SARIF level.

    LOW maps to warning, MEDIUM and HIGH to error, anything else to note.

    Example:
        >>> get_sarif_level(Score.LOW)
        <SarifLevel.WARNING: 'warning'>
        >>> get_sarif_level("")
        <SarifLevel.NOTE: 'note'>
    """
    if isinstance(severity, Score):
        severity = severity.value
    return _LEVELS.get(severity or "", SarifLevel.NOTE)


def sort_issues(issues: Iterable["Issue"]) -> list["Issue"]:
    """Return issues ordered by severity (HIGH first).

    The sort is stable, so issues of equal severity keep their input order.
    """
    return sorted(issues, key=lambda issue: _RANK[issue.severity])
