"""Rule and taxonomy registries for SARIF report assembly.

Both registries deduplicate by identifier and keep first-occurrence order.
They hold per-conversion state and are created fresh for every report.

Provides:
- uuid3: Deterministic content-derived GUID
- TaxonomyRegistry: One taxon per distinct CWE id
- RuleRegistry: One rule descriptor and index per distinct rule id
"""

import uuid
from typing import Callable

import structlog

from sastreport.core import cwe
from sastreport.core.cwe import Weakness
from sastreport.core.issue import Issue
from sastreport.core.reporting.models import (
    MultiformatMessageString,
    PropertyBag,
    ReportingConfiguration,
    ReportingDescriptor,
    ReportingDescriptorReference,
    ReportingDescriptorRelationship,
    ToolComponentReference,
)
from sastreport.core.severity import get_sarif_level

logger = structlog.get_logger()

WeaknessLookup = Callable[[str], Weakness]


def uuid3(value: str) -> str:
    """Name-based (MD5) UUID of `value` under the nil namespace.

    The same value always gives the same GUID, which keeps reports
    byte-identical across runs.
    """
    return str(uuid.uuid3(uuid.UUID(int=0), value))


def build_taxon(weakness: Weakness, uri: str) -> ReportingDescriptor:
    return ReportingDescriptor(
        id=weakness.id,
        name=weakness.name,
        guid=uuid3(weakness.name),
        help_uri=uri,
        short_description=MultiformatMessageString(text=weakness.description),
    )


class TaxonomyRegistry:
    """Deduplicated CWE taxa in first-occurrence order.

    The first issue referencing a CWE id decides the taxon's help URI.
    """

    def __init__(self, lookup: WeaknessLookup = cwe.get):
        self._lookup = lookup
        self._weaknesses: dict[str, Weakness] = {}
        self._taxa: dict[str, ReportingDescriptor] = {}

    def resolve(self, cwe_id: str, url: str) -> ReportingDescriptor:
        """Return the taxon for `cwe_id`, creating it on first sight."""
        taxon = self._taxa.get(cwe_id)
        if taxon is None:
            weakness = self._lookup(cwe_id)
            self._weaknesses[cwe_id] = weakness
            taxon = build_taxon(weakness, url)
            self._taxa[cwe_id] = taxon
        return taxon

    def weakness(self, cwe_id: str) -> Weakness | None:
        return self._weaknesses.get(cwe_id)

    @property
    def taxa(self) -> list[ReportingDescriptor]:
        return list(self._taxa.values())

    def __len__(self) -> int:
        return len(self._taxa)


class RuleRegistry:
    """Deduplicated rule descriptors with stable zero-based indices.

    A rule is described once, from the first issue that reports it. Later
    issues with the same rule id reuse that descriptor, even when they carry
    a different CWE.
    """

    def __init__(self):
        self._indices: dict[str, int] = {}
        self._rules: list[ReportingDescriptor] = []

    def resolve(
        self, issue: Issue, taxon: ReportingDescriptor
    ) -> tuple[ReportingDescriptor, int]:
        """Return (descriptor, index) for the issue's rule."""
        index = self._indices.get(issue.rule_id)
        if index is not None:
            return self._rules[index], index

        index = len(self._rules)
        rule = self._build_rule(issue, taxon)
        self._indices[issue.rule_id] = index
        self._rules.append(rule)
        logger.debug("sarif_rule_registered", rule_id=issue.rule_id, index=index)
        return rule, index

    @property
    def rules(self) -> list[ReportingDescriptor]:
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    @staticmethod
    def _build_rule(issue: Issue, taxon: ReportingDescriptor) -> ReportingDescriptor:
        severity = str(issue.severity)
        return ReportingDescriptor(
            id=issue.rule_id,
            name=issue.what,
            short_description=MultiformatMessageString(text=issue.what),
            full_description=MultiformatMessageString(text=issue.what),
            help=MultiformatMessageString(
                text=f"{issue.what}\nSeverity: {severity}\nConfidence: {issue.confidence}\n"
            ),
            properties=PropertyBag(tags=[f"{cwe.ACRONYM}-{issue.cwe.id}", severity]),
            default_configuration=ReportingConfiguration(
                level=get_sarif_level(issue.severity)
            ),
            relationships=[
                ReportingDescriptorRelationship(
                    target=ReportingDescriptorReference(
                        id=taxon.id,
                        guid=taxon.guid,
                        tool_component=ToolComponentReference(name=cwe.ACRONYM),
                    ),
                    kinds=["superset"],
                )
            ],
        )
