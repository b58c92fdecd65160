"""
Adaptor specifier parsing.

Adaptors are referenced by versioned npm specifiers such as
``@openfn/language-dhis2@1.2.3``. The editor only needs the short name
(``dhis2``) to label diagrams and pick metadata.
"""

import logging
import re

from adaptor_metadata.schemas.adaptor import AdaptorSpecifier

logger = logging.getLogger(__name__)

# Name shown for specifiers that do not reference an OpenFn language adaptor
UNKNOWN_ADAPTOR = "unknown"

# Scope separator is "/" in npm specifiers; "." is accepted as well
ADAPTOR_SPECIFIER_PATTERN = re.compile(
    r"@openfn[./]language-(?P<name>[^@]+)@(?P<version>\S*)"
)


def parse_adaptor_specifier(specifier: str) -> AdaptorSpecifier | None:
    """
    Parse the first adaptor reference in a specifier string.

    Args:
        specifier: Free-form specifier (e.g., "@openfn/language-http@4.2.0")

    Returns:
        Parsed specifier, or None if no adaptor reference is present
    """
    match = ADAPTOR_SPECIFIER_PATTERN.search(specifier)
    if match is None:
        return None

    return AdaptorSpecifier(
        name=match.group("name"),
        version=match.group("version") or None,
    )


def extract_adaptor_name(specifier: str) -> str:
    """
    Get the short adaptor name from a specifier.

    Examples:
        "@openfn/language-dhis2@1.2.3" -> "dhis2"
        "garbage" -> "unknown"
    """
    parsed = parse_adaptor_specifier(specifier)
    if parsed is None:
        logger.debug(f"No adaptor name in specifier {specifier!r}")
        return UNKNOWN_ADAPTOR
    return parsed.name
