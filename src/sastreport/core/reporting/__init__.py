"""SARIF report assembly and export.

Builds standardized SARIF 2.1.0 documents from scanner issues, with
deduplicated rules and CWE taxa and normalized source locations.

Provides:
- convert_to_sarif_report: Main conversion entry point
- SarifBuilder: Reusable report builder for one tool
- LocationParseError: Raised on malformed line/column values
- export_sarif / to_json: Serialization of finished reports
"""

from .export import export_sarif, to_json
from .location import LocationParseError
from .models import SarifReport
from .sarif import SarifBuilder, convert_to_sarif_report

__all__ = [
    "convert_to_sarif_report",
    "SarifBuilder",
    "SarifReport",
    "LocationParseError",
    "export_sarif",
    "to_json",
]
