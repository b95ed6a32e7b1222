"""SARIF JSON export.

Serializes finished reports for upload to code-scanning services.
"""

from sastreport.core.reporting.models import SarifReport


def to_json(report: SarifReport, indent: int | None = 2) -> str:
    """Serialize a report to SARIF JSON.

    Uses camelCase wire names and omits unset optional fields.
    """
    return report.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def export_sarif(report: SarifReport, output_path: str) -> str:
    """Export a report to a SARIF JSON file.

    Args:
        report: Report returned by convert_to_sarif_report
        output_path: Path to write the SARIF file

    Returns:
        Path to written SARIF file

    Example:
        >>> report = convert_to_sarif_report(roots, issues)
        >>> sarif_path = export_sarif(report, "/tmp/results.sarif")
    """
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(to_json(report))
        f.write("\n")

    return output_path
