"""SARIF report assembly from scanner issues.

Converts the flat issue list produced by the rule engine into a single-run
SARIF 2.1.0 document. Rules and CWE taxa are deduplicated, every result points
back at its rule by index, and GUIDs are content-derived so identical input
always yields an identical report.

Conversion is all-or-nothing: an issue with a malformed line or column
aborts the whole report with LocationParseError.

Provides:
- SarifBuilder: Per-report assembly of rules, taxa and results
- convert_to_sarif_report: One-call conversion of issues to a SarifReport
"""

from typing import Iterable, Sequence

import structlog

from sastreport.core import cwe
from sastreport.core.config import (
    DEFAULT_TOOL_INFORMATION_URI,
    DEFAULT_TOOL_NAME,
    DEFAULT_TOOL_VERSION,
)
from sastreport.core.issue import Issue
from sastreport.core.reporting.location import LocationParseError, parse_location
from sastreport.core.reporting.models import (
    Message,
    MultiformatMessageString,
    ReportingDescriptor,
    Result,
    Run,
    SarifReport,
    Tool,
    ToolComponent,
    ToolComponentReference,
)
from sastreport.core.reporting.registry import (
    RuleRegistry,
    TaxonomyRegistry,
    WeaknessLookup,
    uuid3,
)
from sastreport.core.severity import get_sarif_level

logger = structlog.get_logger()


def build_taxonomies(taxa: list[ReportingDescriptor]) -> list[ToolComponent]:
    """Build the CWE taxonomy group holding the referenced taxa."""
    return [
        ToolComponent(
            name=cwe.ACRONYM,
            version=cwe.VERSION,
            release_date_utc=cwe.RELEASE_DATE,
            information_uri=cwe.INFORMATION_URI,
            download_uri=cwe.DOWNLOAD_URI,
            organization=cwe.ORGANIZATION,
            short_description=MultiformatMessageString(text=cwe.DESCRIPTION),
            guid=uuid3(cwe.ACRONYM),
            is_comprehensive=True,
            minimum_required_localized_data_semantic_version=cwe.VERSION,
            taxa=taxa,
        )
    ]


class SarifBuilder:
    """Assembles SARIF reports for one tool.

    The builder only holds tool metadata and root paths. Rule and taxonomy
    registries are created inside each `build` call, so a builder can be
    reused and calls never share deduplication state.

    Args:
        root_paths: Prefixes stripped from issue file paths, first match wins
        tool_version: Version written into the driver
        tool_name: Driver name
        tool_information_uri: Driver homepage
        lookup: CWE catalog lookup, must return an entry for any id
    """

    def __init__(
        self,
        root_paths: Sequence[str] = (),
        tool_version: str = DEFAULT_TOOL_VERSION,
        tool_name: str = DEFAULT_TOOL_NAME,
        tool_information_uri: str = DEFAULT_TOOL_INFORMATION_URI,
        lookup: WeaknessLookup = cwe.get,
    ):
        self.root_paths = list(root_paths)
        self.tool_version = tool_version
        self.tool_name = tool_name
        self.tool_information_uri = tool_information_uri
        self.lookup = lookup

    def build(self, issues: Iterable[Issue]) -> SarifReport:
        """Convert issues into a SarifReport.

        Raises:
            LocationParseError: If any issue has a malformed line or column.
                No report is produced in that case.
        """
        taxonomy = TaxonomyRegistry(self.lookup)
        rules = RuleRegistry()
        results: list[Result] = []

        for issue in issues:
            taxon = taxonomy.resolve(issue.cwe.id, issue.cwe.url)
            rule, rule_index = rules.resolve(issue, taxon)

            try:
                location = parse_location(issue, self.root_paths)
            except LocationParseError as e:
                logger.error(
                    "sarif_location_parse_failed",
                    rule_id=issue.rule_id,
                    file=issue.file,
                    error=str(e),
                )
                raise

            results.append(
                Result(
                    rule_id=rule.id,
                    rule_index=rule_index,
                    level=get_sarif_level(issue.severity),
                    message=Message(text=issue.what),
                    locations=[location],
                )
            )

        run = Run(
            results=results,
            taxonomies=build_taxonomies(taxonomy.taxa),
            tool=Tool(driver=self._build_driver(rules.rules)),
        )
        logger.info(
            "sarif_report_built",
            results=len(results),
            rules=len(rules),
            taxa=len(taxonomy),
        )
        return SarifReport(runs=[run])

    def _build_driver(self, rules: list[ReportingDescriptor]) -> ToolComponent:
        return ToolComponent(
            name=self.tool_name,
            version=self.tool_version,
            information_uri=self.tool_information_uri,
            supported_taxonomies=[
                # CWE is the only taxonomy, at position 0 of run.taxonomies
                ToolComponentReference(name=cwe.ACRONYM, index=0, guid=uuid3(cwe.ACRONYM)),
            ],
            rules=rules,
        )


def convert_to_sarif_report(
    root_paths: Sequence[str],
    issues: Iterable[Issue],
    tool_version: str = DEFAULT_TOOL_VERSION,
    **builder_options,
) -> SarifReport:
    """Convert scanner issues to a SARIF report.

    Args:
        root_paths: Prefixes stripped from issue file paths
        issues: Issues in reporting order
        tool_version: Version written into the tool driver
        **builder_options: tool_name, tool_information_uri or lookup overrides

    Returns:
        Complete SarifReport with one run

    Raises:
        LocationParseError: On the first malformed line or column

    Example:
        >>> report = convert_to_sarif_report(["/src/app"], issues, tool_version="2.4.0")
        >>> report.runs[0].tool.driver.version
        '2.4.0'
    """
    builder = SarifBuilder(root_paths, tool_version=tool_version, **builder_options)
    return builder.build(issues)
