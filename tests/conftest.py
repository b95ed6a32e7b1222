"""Shared fixtures for report generation tests."""

import pytest

from sastreport.core.issue import Issue


def make_issue(
    rule_id: str = "G304",
    cwe_id: str = "22",
    severity: str = "MEDIUM",
    confidence: str = "HIGH",
    what: str = "Potential file inclusion via variable",
    file: str = "/home/dev/project/cmd/main.go",
    line: str = "42",
    col: str = "3",
) -> Issue:
    return Issue(
        severity=severity,
        confidence=confidence,
        cwe={"id": cwe_id, "url": f"https://cwe.mitre.org/data/definitions/{cwe_id}.html"},
        rule_id=rule_id,
        what=what,
        file=file,
        code="",
        line=line,
        col=col,
    )


@pytest.fixture
def issue_factory():
    """Factory for Issue objects with realistic defaults."""
    return make_issue


@pytest.fixture
def mixed_issues():
    """Issues with repeated rules and CWEs across several files."""
    return [
        make_issue(rule_id="G304", cwe_id="22", severity="MEDIUM", line="42", col="3"),
        make_issue(
            rule_id="G101",
            cwe_id="798",
            severity="HIGH",
            confidence="LOW",
            what="Potential hardcoded credentials",
            file="/home/dev/project/config/secrets.go",
            line="7",
            col="2",
        ),
        make_issue(
            rule_id="G304",
            cwe_id="22",
            severity="MEDIUM",
            file="/home/dev/project/pkg/loader.go",
            line="10-15",
            col="1",
        ),
        make_issue(
            rule_id="G104",
            cwe_id="703",
            severity="LOW",
            what="Errors unhandled.",
            file="/home/dev/project/pkg/loader.go",
            line="88",
            col="5",
        ),
        make_issue(
            rule_id="G401",
            cwe_id="327",
            severity="MEDIUM",
            what="Use of weak cryptographic primitive",
            file="/home/dev/other/hash.go",
            line="12",
            col="9",
        ),
    ]
