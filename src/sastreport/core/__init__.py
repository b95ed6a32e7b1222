"""Core report functionality.

Provides:
- Issue models and scanner report loading
- Severity scores and SARIF level mapping
- CWE weakness catalog
- Configuration loading
"""

from .config import Config, load_config, resolve_tool_version
from .issue import CWE, Issue, ReportInfo, load_report
from .severity import SarifLevel, Score, get_sarif_level, sort_issues

__all__ = [
    "Config",
    "load_config",
    "resolve_tool_version",
    "CWE",
    "Issue",
    "ReportInfo",
    "load_report",
    "SarifLevel",
    "Score",
    "get_sarif_level",
    "sort_issues",
]
