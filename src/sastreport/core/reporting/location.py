"""Source location parsing for SARIF results.

Turns the textual line/column values reported by rules into SARIF regions
and makes file paths relative to the scanned root directories.

Provides:
- LocationParseError: Raised when a line or column is not an integer
- parse_region: Build a Region from line-spec and column text
- relativize_path: Strip the first matching root prefix from a path
- parse_location: Build a full Location for an issue
"""

from typing import Sequence

from sastreport.core.issue import Issue
from sastreport.core.reporting.models import (
    ArtifactLocation,
    Location,
    PhysicalLocation,
    Region,
)


class LocationParseError(ValueError):
    """A line or column value could not be parsed as an integer.

    Attributes:
        field: Which value failed ("line" or "column")
        value: The offending text
    """

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field} {value!r}: expected an integer")


def _parse_line(segment: str, line_spec: str) -> int:
    if not (segment.isascii() and segment.isdigit()):
        raise LocationParseError("line", line_spec)
    return int(segment)


def parse_region(line_spec: str, col: str) -> Region:
    """Parse a line spec ("42" or "10-15") and column into a Region.

    The column has no separate end value, so start and end column match.

    Raises:
        LocationParseError: If a line segment or the column is not an integer

    Example:
        >>> parse_region("10-15", "1").end_line
        15
    """
    lines = line_spec.split("-")
    start_line = _parse_line(lines[0], line_spec)
    end_line = start_line
    if len(lines) > 1:
        end_line = _parse_line(lines[1], line_spec)

    digits = col[1:] if col[:1] in ("+", "-") else col
    if not (digits.isascii() and digits.isdigit()):
        raise LocationParseError("column", col)
    column = int(col)

    return Region(
        start_line=start_line,
        end_line=end_line,
        start_column=column,
        end_column=column,
    )


def relativize_path(file_path: str, root_paths: Sequence[str]) -> str:
    """Make `file_path` relative to the first root that prefixes it.

    Roots are tried in the given order and only the first match applies.
    Paths outside every root are returned unchanged.
    """
    for root_path in root_paths:
        if file_path.startswith(root_path):
            return file_path.replace(root_path + "/", "", 1)
    return file_path


def parse_location(issue: Issue, root_paths: Sequence[str]) -> Location:
    """Build the SARIF location of an issue.

    Raises:
        LocationParseError: If the issue's line or column is malformed
    """
    region = parse_region(issue.line, issue.col)
    return Location(
        physical_location=PhysicalLocation(
            artifact_location=ArtifactLocation(uri=relativize_path(issue.file, root_paths)),
            region=region,
        )
    )
