"""
Utility functions for the wire model generator.
"""

import keyword
import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Boundary between a lowercase letter/digit and an uppercase letter
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Members every generated model class defines besides its fields
MODEL_MEMBER_NAMES = frozenset({"PARSER", "from_x_content", "to_x_content"})


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "cluster_name" -> "ClusterName"
        "buildType" -> "BuildType"
        "build-hash" -> "BuildHash"
        "version" -> "Version"

    Args:
        text: The text to convert (snake_case, camelCase, kebab-case, or space-separated)

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def pascal_to_snake_case(text: str) -> str:
    """Convert PascalCase or camelCase to snake_case.

    Examples:
        "MainResponseModel8" -> "main_response_model8"
        "Version" -> "version"
    """
    return _CAMEL_BOUNDARY.sub("_", text).lower()


def to_identifier(name: str) -> str:
    """Turn a wire key into a valid Python attribute name.

    Keys that already are valid, non-keyword identifiers are returned
    unchanged so that generated attributes read like the wire format.
    Anything else is reduced to lowercase snake_case words, prefixed with
    ``f_`` when it starts with a digit and suffixed with ``_`` when it is a
    keyword. Names of the members a generated model defines are suffixed
    with ``_`` as well.
    """
    if name.isidentifier() and not keyword.iskeyword(name):
        ident = name
    else:
        words = re.findall(r"[A-Za-z0-9]+", _CAMEL_BOUNDARY.sub(" ", name))
        ident = "_".join(word.lower() for word in words) or "field"
        if ident[0].isdigit():
            ident = f"f_{ident}"
    if keyword.iskeyword(ident) or ident in MODEL_MEMBER_NAMES:
        ident = f"{ident}_"
    return ident
