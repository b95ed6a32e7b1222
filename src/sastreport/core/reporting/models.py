"""SARIF 2.1.0 document models.

Field names are snake_case in Python and camelCase on the wire; dump with
`by_alias=True, exclude_none=True` to get schema-conformant JSON. All models
are frozen so a finished report cannot be mutated.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sastreport.core.severity import SarifLevel

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"


class SarifModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )


class Message(SarifModel):
    text: str


class MultiformatMessageString(SarifModel):
    text: str


class PropertyBag(SarifModel):
    tags: list[str] = Field(default_factory=list)


class ReportingConfiguration(SarifModel):
    level: SarifLevel = SarifLevel.WARNING


class ToolComponentReference(SarifModel):
    name: str
    index: int | None = None
    guid: str | None = None


class ReportingDescriptorReference(SarifModel):
    id: str
    guid: str | None = None
    tool_component: ToolComponentReference | None = None


class ReportingDescriptorRelationship(SarifModel):
    target: ReportingDescriptorReference
    kinds: list[str] = Field(default_factory=list)


class ReportingDescriptor(SarifModel):
    """A rule definition, or a taxon when listed under a taxonomy."""

    id: str
    name: str | None = None
    guid: str | None = None
    help_uri: str | None = None
    short_description: MultiformatMessageString | None = None
    full_description: MultiformatMessageString | None = None
    help: MultiformatMessageString | None = None
    properties: PropertyBag | None = None
    default_configuration: ReportingConfiguration | None = None
    relationships: list[ReportingDescriptorRelationship] | None = None


class ToolComponent(SarifModel):
    """Tool driver or taxonomy component."""

    name: str
    version: str | None = None
    guid: str | None = None
    organization: str | None = None
    release_date_utc: str | None = None
    information_uri: str | None = None
    download_uri: str | None = None
    short_description: MultiformatMessageString | None = None
    is_comprehensive: bool | None = None
    minimum_required_localized_data_semantic_version: str | None = None
    supported_taxonomies: list[ToolComponentReference] | None = None
    rules: list[ReportingDescriptor] | None = None
    taxa: list[ReportingDescriptor] | None = None


class Tool(SarifModel):
    driver: ToolComponent


class ArtifactLocation(SarifModel):
    uri: str


class Region(SarifModel):
    start_line: int
    end_line: int
    start_column: int
    end_column: int


class PhysicalLocation(SarifModel):
    artifact_location: ArtifactLocation
    region: Region


class Location(SarifModel):
    physical_location: PhysicalLocation


class Result(SarifModel):
    rule_id: str
    rule_index: int
    level: SarifLevel
    message: Message
    locations: list[Location]


class Run(SarifModel):
    results: list[Result]
    taxonomies: list[ToolComponent]
    tool: Tool


class SarifReport(SarifModel):
    """Top-level SARIF log with a single run."""

    version: str = SARIF_VERSION
    schema_uri: str = Field(default=SARIF_SCHEMA, alias="$schema")
    runs: list[Run]
