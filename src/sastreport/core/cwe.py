"""Common Weakness Enumeration catalog.

Holds the MITRE CWE entries referenced by the scanner rules, plus the
catalog metadata written into SARIF taxonomies.

Provides:
- Weakness: One catalog entry (id, name, description)
- get: Total lookup, unknown ids yield a placeholder entry
- Catalog constants (ACRONYM, VERSION, RELEASE_DATE, ...)
"""

from pydantic import BaseModel, ConfigDict

ACRONYM = "CWE"
VERSION = "4.4"
RELEASE_DATE = "2021-03-15"
ORGANIZATION = "MITRE"
DESCRIPTION = "The MITRE Common Weakness Enumeration"
INFORMATION_URI = f"https://cwe.mitre.org/data/published/cwe_v{VERSION}.pdf/"
DOWNLOAD_URI = f"https://cwe.mitre.org/data/xml/cwec_v{VERSION}.xml.zip"


class Weakness(BaseModel):
    """A single CWE catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str


_ENTRIES = [
    Weakness(
        id="118",
        name="Incorrect Access of Indexable Resource ('Range Error')",
        description="The software does not restrict or incorrectly restricts operations within the boundaries of a resource that is accessed using an index or pointer, such as memory or files.",
    ),
    Weakness(
        id="190",
        name="Integer Overflow or Wraparound",
        description="The software performs a calculation that can produce an integer overflow or wraparound, when the logic assumes that the resulting value will always be larger than the original value. This can introduce other weaknesses when the calculation is used for resource management or execution control.",
    ),
    Weakness(
        id="200",
        name="Exposure of Sensitive Information to an Unauthorized Actor",
        description="The product exposes sensitive information to an actor that is not explicitly authorized to have access to that information.",
    ),
    Weakness(
        id="22",
        name="Improper Limitation of a Pathname to a Restricted Directory ('Path Traversal')",
        description="The software uses external input to construct a pathname that is intended to identify a file or directory that is located underneath a restricted parent directory, but the software does not properly neutralize special elements within the pathname that can cause the pathname to resolve to a location that is outside of the restricted directory.",
    ),
    Weakness(
        id="242",
        name="Use of Inherently Dangerous Function",
        description="The program calls a function that can never be guaranteed to work safely.",
    ),
    Weakness(
        id="276",
        name="Incorrect Default Permissions",
        description="During installation, installed file permissions are set to allow anyone to modify those files.",
    ),
    Weakness(
        id="295",
        name="Improper Certificate Validation",
        description="The software does not validate, or incorrectly validates, a certificate.",
    ),
    Weakness(
        id="310",
        name="Cryptographic Issues",
        description="Weaknesses in this category are related to the design and implementation of data confidentiality and integrity. Frequently these deal with the use of encoding techniques, encryption libraries, and hashing algorithms. The weaknesses in this category could lead to a degradation of the quality data if they are not addressed.",
    ),
    Weakness(
        id="322",
        name="Key Exchange without Entity Authentication",
        description="The software performs a key exchange with an actor without verifying the identity of that actor.",
    ),
    Weakness(
        id="326",
        name="Inadequate Encryption Strength",
        description="The software stores or transmits sensitive data using an encryption scheme that is theoretically sound, but is not strong enough for the level of protection required.",
    ),
    Weakness(
        id="327",
        name="Use of a Broken or Risky Cryptographic Algorithm",
        description="The use of a broken or risky cryptographic algorithm is an unnecessary risk that may result in the exposure of sensitive information.",
    ),
    Weakness(
        id="338",
        name="Use of Cryptographically Weak Pseudo-Random Number Generator (PRNG)",
        description="The product uses a Pseudo-Random Number Generator (PRNG) in a security context, but the PRNG's algorithm is not cryptographically strong.",
    ),
    Weakness(
        id="377",
        name="Insecure Temporary File",
        description="Creating and using insecure temporary files can leave application and system data vulnerable to attack.",
    ),
    Weakness(
        id="388",
        name="7PK - Errors",
        description="This category represents one of the phyla in the Seven Pernicious Kingdoms vulnerability classification. It includes weaknesses that occur when an application does not properly handle errors that occur during processing.",
    ),
    Weakness(
        id="400",
        name="Uncontrolled Resource Consumption",
        description="The software does not properly control the allocation and maintenance of a limited resource, thereby enabling an actor to influence the amount of resources consumed, eventually leading to the exhaustion of available resources.",
    ),
    Weakness(
        id="409",
        name="Improper Handling of Highly Compressed Data (Data Amplification)",
        description="The software does not handle or incorrectly handles a compressed input with a very high compression ratio that produces a large output.",
    ),
    Weakness(
        id="703",
        name="Improper Check or Handling of Exceptional Conditions",
        description="The software does not properly anticipate or handle exceptional conditions that rarely occur during normal operation of the software.",
    ),
    Weakness(
        id="78",
        name="Improper Neutralization of Special Elements used in an OS Command ('OS Command Injection')",
        description="The software constructs all or part of an OS command using externally-influenced input from an upstream component, but it does not neutralize or incorrectly neutralizes special elements that could modify the intended OS command when it is sent to a downstream component.",
    ),
    Weakness(
        id="79",
        name="Improper Neutralization of Input During Web Page Generation ('Cross-site Scripting')",
        description="The software does not neutralize or incorrectly neutralizes user-controllable input before it is placed in output that is used as a web page that is served to other users.",
    ),
    Weakness(
        id="798",
        name="Use of Hard-coded Credentials",
        description="The software contains hard-coded credentials, such as a password or cryptographic key, which it uses for its own inbound authentication, outbound communication to external components, or encryption of internal data.",
    ),
    Weakness(
        id="88",
        name="Improper Neutralization of Argument Delimiters in a Command ('Argument Injection')",
        description="The software constructs a string for a command to executed by a separate component in another control sphere, but it does not properly delimit the intended arguments, options, or switches within that command string.",
    ),
    Weakness(
        id="89",
        name="Improper Neutralization of Special Elements used in an SQL Command ('SQL Injection')",
        description="The software constructs all or part of an SQL command using externally-influenced input from an upstream component, but it does not neutralize or incorrectly neutralizes special elements that could modify the intended SQL command when it is sent to a downstream component.",
    ),
]

CATALOG: dict[str, Weakness] = {weakness.id: weakness for weakness in _ENTRIES}


def placeholder(cwe_id: str) -> Weakness:
    """Stand-in entry for an id missing from the catalog."""
    return Weakness(id=cwe_id, name=f"{ACRONYM}-{cwe_id}", description="")


def get(cwe_id: str) -> Weakness:
    """Look up a weakness by id.

    Never fails: ids missing from the catalog return `placeholder(cwe_id)`.

    Example:
        >>> get("22").name.startswith("Improper Limitation")
        True
        >>> get("99999").name
        'CWE-99999'
    """
    return CATALOG.get(cwe_id) or placeholder(cwe_id)
