"""Tests for SARIF report assembly and export."""

import json

import pytest
from pydantic import ValidationError

from sastreport.core import cwe
from sastreport.core.config import DEFAULT_TOOL_VERSION
from sastreport.core.reporting import (
    LocationParseError,
    SarifBuilder,
    convert_to_sarif_report,
    export_sarif,
    to_json,
)
from sastreport.core.reporting.models import SARIF_SCHEMA
from sastreport.core.reporting.registry import uuid3
from sastreport.core.severity import SarifLevel


ROOTS = ["/home/dev/project"]


def test_report_envelope(mixed_issues):
    report = convert_to_sarif_report(ROOTS, mixed_issues)

    assert report.version == "2.1.0"
    assert report.schema_uri == SARIF_SCHEMA
    assert len(report.runs) == 1


def test_one_result_per_issue_in_input_order(mixed_issues):
    run = convert_to_sarif_report(ROOTS, mixed_issues).runs[0]

    assert [r.rule_id for r in run.results] == ["G304", "G101", "G304", "G104", "G401"]
    assert [r.message.text for r in run.results] == [i.what for i in mixed_issues]


def test_rules_deduplicated_by_first_occurrence(mixed_issues):
    run = convert_to_sarif_report(ROOTS, mixed_issues).runs[0]

    assert [rule.id for rule in run.tool.driver.rules] == ["G304", "G101", "G104", "G401"]


def test_taxa_deduplicated_by_first_occurrence(mixed_issues):
    run = convert_to_sarif_report(ROOTS, mixed_issues).runs[0]

    assert len(run.taxonomies) == 1
    assert [taxon.id for taxon in run.taxonomies[0].taxa] == ["22", "798", "703", "327"]


def test_rule_index_matches_rule_position(mixed_issues):
    run = convert_to_sarif_report(ROOTS, mixed_issues).runs[0]
    rules = run.tool.driver.rules

    assert [r.rule_index for r in run.results] == [0, 1, 0, 2, 3]
    for result in run.results:
        assert rules[result.rule_index].id == result.rule_id


def test_result_levels(mixed_issues):
    run = convert_to_sarif_report(ROOTS, mixed_issues).runs[0]

    assert [r.level for r in run.results] == [
        SarifLevel.ERROR,
        SarifLevel.ERROR,
        SarifLevel.ERROR,
        SarifLevel.WARNING,
        SarifLevel.ERROR,
    ]


def test_result_locations(mixed_issues):
    run = convert_to_sarif_report(ROOTS, mixed_issues).runs[0]
    locations = [r.locations[0].physical_location for r in run.results]

    assert [loc.artifact_location.uri for loc in locations] == [
        "cmd/main.go",
        "config/secrets.go",
        "pkg/loader.go",
        "pkg/loader.go",
        "/home/dev/other/hash.go",
    ]
    assert (locations[2].region.start_line, locations[2].region.end_line) == (10, 15)
    assert locations[2].region.start_column == locations[2].region.end_column == 1


def test_taxonomy_metadata(mixed_issues):
    taxonomy = convert_to_sarif_report(ROOTS, mixed_issues).runs[0].taxonomies[0]

    assert taxonomy.name == "CWE"
    assert taxonomy.version == "4.4"
    assert taxonomy.release_date_utc == "2021-03-15"
    assert taxonomy.organization == "MITRE"
    assert taxonomy.information_uri == "https://cwe.mitre.org/data/published/cwe_v4.4.pdf/"
    assert taxonomy.download_uri == "https://cwe.mitre.org/data/xml/cwec_v4.4.xml.zip"
    assert taxonomy.short_description.text == "The MITRE Common Weakness Enumeration"
    assert taxonomy.guid == uuid3("CWE")
    assert taxonomy.is_comprehensive is True
    assert taxonomy.minimum_required_localized_data_semantic_version == "4.4"


def test_driver_metadata(mixed_issues):
    driver = convert_to_sarif_report(ROOTS, mixed_issues, tool_version="2.4.0").runs[0].tool.driver

    assert driver.name == "gosec"
    assert driver.version == "2.4.0"
    assert driver.information_uri == "https://github.com/securego/gosec/"
    assert len(driver.supported_taxonomies) == 1
    supported = driver.supported_taxonomies[0]
    assert supported.name == "CWE"
    assert supported.index == 0
    assert supported.guid == uuid3("CWE")


def test_driver_version_fallback(mixed_issues):
    driver = convert_to_sarif_report(ROOTS, mixed_issues).runs[0].tool.driver

    assert driver.version == DEFAULT_TOOL_VERSION == "devel"


def test_custom_tool_metadata(issue_factory):
    report = convert_to_sarif_report(
        [], [issue_factory()], tool_name="pyscan", tool_information_uri="https://example.com/pyscan"
    )
    driver = report.runs[0].tool.driver

    assert driver.name == "pyscan"
    assert driver.information_uri == "https://example.com/pyscan"


def test_empty_input():
    run = convert_to_sarif_report(ROOTS, []).runs[0]

    assert run.results == []
    assert run.tool.driver.rules == []
    assert run.taxonomies[0].taxa == []


def test_shared_rule_keeps_first_weakness(issue_factory):
    issues = [
        issue_factory(rule_id="G304", cwe_id="22"),
        issue_factory(rule_id="G304", cwe_id="703", line="99"),
    ]

    run = convert_to_sarif_report(ROOTS, issues).runs[0]

    assert len(run.tool.driver.rules) == 1
    assert run.tool.driver.rules[0].relationships[0].target.id == "22"
    assert [taxon.id for taxon in run.taxonomies[0].taxa] == ["22", "703"]


def test_unknown_weakness_uses_placeholder(issue_factory):
    run = convert_to_sarif_report(ROOTS, [issue_factory(cwe_id="424242")]).runs[0]

    taxon = run.taxonomies[0].taxa[0]
    assert taxon.id == "424242"
    assert taxon.name == "CWE-424242"
    assert taxon.guid == uuid3("CWE-424242")


def test_custom_lookup(issue_factory):
    def lookup(cwe_id):
        return cwe.Weakness(id=cwe_id, name="Custom weakness", description="from a test catalog")

    run = convert_to_sarif_report(ROOTS, [issue_factory()], lookup=lookup).runs[0]

    assert run.taxonomies[0].taxa[0].name == "Custom weakness"


def test_parse_failure_aborts_conversion(issue_factory):
    issues = [
        issue_factory(rule_id="G304", line="42"),
        issue_factory(rule_id="G101", line="x"),
        issue_factory(rule_id="G104", line="7"),
    ]

    with pytest.raises(LocationParseError) as exc_info:
        convert_to_sarif_report(ROOTS, issues)

    assert exc_info.value.value == "x"


def test_bad_column_aborts_conversion(issue_factory):
    with pytest.raises(LocationParseError):
        convert_to_sarif_report(ROOTS, [issue_factory(col="three")])


def test_conversion_is_deterministic(mixed_issues):
    first = convert_to_sarif_report(ROOTS, mixed_issues, tool_version="1.0.0")
    second = convert_to_sarif_report(ROOTS, mixed_issues, tool_version="1.0.0")

    assert first == second
    assert to_json(first) == to_json(second)


def test_builder_calls_do_not_share_state(mixed_issues, issue_factory):
    builder = SarifBuilder(ROOTS, tool_version="1.0.0")

    builder.build(mixed_issues)
    run = builder.build([issue_factory(rule_id="G401", cwe_id="327")]).runs[0]

    assert [rule.id for rule in run.tool.driver.rules] == ["G401"]
    assert run.results[0].rule_index == 0
    assert [taxon.id for taxon in run.taxonomies[0].taxa] == ["327"]


def test_builder_accepts_generators(mixed_issues):
    report = SarifBuilder(ROOTS).build(issue for issue in mixed_issues)

    assert len(report.runs[0].results) == len(mixed_issues)


def test_report_is_frozen(mixed_issues):
    report = convert_to_sarif_report(ROOTS, mixed_issues)

    with pytest.raises(ValidationError):
        report.version = "1.0.0"


# Export


def test_to_json_uses_sarif_field_names(mixed_issues):
    data = json.loads(to_json(convert_to_sarif_report(ROOTS, mixed_issues, tool_version="2.4.0")))

    assert data["version"] == "2.1.0"
    assert data["$schema"] == SARIF_SCHEMA
    run = data["runs"][0]

    result = run["results"][2]
    assert result["ruleId"] == "G304"
    assert result["ruleIndex"] == 0
    assert result["level"] == "error"
    assert result["message"] == {"text": "Potential file inclusion via variable"}
    assert result["locations"][0]["physicalLocation"] == {
        "artifactLocation": {"uri": "pkg/loader.go"},
        "region": {"startLine": 10, "endLine": 15, "startColumn": 1, "endColumn": 1},
    }

    rule = run["tool"]["driver"]["rules"][1]
    assert rule["defaultConfiguration"] == {"level": "error"}
    assert rule["properties"] == {"tags": ["CWE-798", "HIGH"]}
    assert rule["relationships"][0]["target"]["toolComponent"] == {"name": "CWE"}
    assert "guid" not in rule

    driver = run["tool"]["driver"]
    assert driver["supportedTaxonomies"] == [{"name": "CWE", "index": 0, "guid": uuid3("CWE")}]

    taxonomy = run["taxonomies"][0]
    assert taxonomy["releaseDateUtc"] == "2021-03-15"
    assert taxonomy["isComprehensive"] is True
    assert taxonomy["minimumRequiredLocalizedDataSemanticVersion"] == "4.4"
    assert taxonomy["taxa"][0]["helpUri"] == "https://cwe.mitre.org/data/definitions/22.html"


def test_export_sarif_writes_file(tmp_path, mixed_issues):
    report = convert_to_sarif_report(ROOTS, mixed_issues)
    output_path = tmp_path / "results.sarif"

    returned = export_sarif(report, str(output_path))

    assert returned == str(output_path)
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert len(data["runs"][0]["results"]) == 5
