"""Scanner issue models and report loading.

Issues are the flat, possibly repetitive stream produced by the rule engine.
Field aliases follow the gosec JSON report format so reports written by the
scanner can be loaded directly.

Provides:
- CWE: Weakness reference carried by an issue
- Issue: One finding reported by a rule
- ReportInfo: A full scanner report (issues, stats, errors)
- load_report: Parse a JSON report file into ReportInfo
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sastreport.core.severity import Score


class CWE(BaseModel):
    """Weakness reference attached to an issue.

    Attributes:
        id: CWE identifier without the "CWE-" prefix (e.g. "22")
        url: Reference URL for the weakness
    """

    model_config = ConfigDict(frozen=True)

    id: str
    url: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)


class Issue(BaseModel):
    """A single finding reported by a rule.

    Line and column stay as text: the rule engine reports ranges as
    "start-end" and location parsing happens during report assembly.

    Attributes:
        severity: Impact score (LOW, MEDIUM, HIGH)
        confidence: How sure the rule is about the finding
        cwe: Weakness classification for the rule
        rule_id: Identifier of the rule that fired (e.g. "G304")
        what: Human readable message
        file: Absolute path of the affected file
        code: Source snippet around the finding
        line: Line or "start-end" line range
        col: Column of the finding
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    severity: Score
    confidence: Score
    cwe: CWE
    rule_id: str
    what: str = Field(alias="details")
    file: str
    code: str = ""
    line: str
    col: str = Field(alias="column")

    @field_validator("severity", "confidence", mode="before")
    @classmethod
    def _coerce_score(cls, value: Any) -> Score:
        return Score(value)

    @field_validator("line", "col", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return str(value)


class ReportInfo(BaseModel):
    """Scanner report: issues plus run statistics and package errors."""

    model_config = ConfigDict(populate_by_name=True)

    errors: dict[str, Any] = Field(default_factory=dict, alias="Golang errors")
    issues: list[Issue] = Field(default_factory=list, alias="Issues")
    stats: dict[str, Any] = Field(default_factory=dict, alias="Stats")
    scanner_version: str | None = Field(default=None, alias="GosecVersion")

    @field_validator("issues", mode="before")
    @classmethod
    def _null_issues(cls, value: Any) -> Any:
        return value if value is not None else []


def load_report(path: str | Path) -> ReportInfo:
    """Load a scanner JSON report from disk.

    Args:
        path: Path to the JSON report

    Returns:
        Parsed ReportInfo

    Raises:
        json.JSONDecodeError: If the file is not JSON
        pydantic.ValidationError: If the JSON is not a scanner report
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return ReportInfo.model_validate(data)
