"""
Identifier helpers for JSON to freezed generation.
"""

import re

# A Dart identifier (class names, field names)
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _capitalize_first(word: str) -> str:
    """Uppercase the first character only, keeping the rest as is."""
    return word[:1].upper() + word[1:]


def camel_case(key: str) -> str:
    """Convert a JSON key to the lowerCamelCase field name.

    Only underscores separate words. The first segment is kept unchanged,
    the following ones get their first letter capitalized.

    Examples:
        "first_name" -> "firstName"
        "id" -> "id"
        "HTTP_code" -> "HTTPCode"
        "a__b" -> "aB"
    """
    segments = key.split("_")
    return segments[0] + "".join(_capitalize_first(segment) for segment in segments[1:])


def capitalize(text: str) -> str:
    """Uppercase the first character: "address" -> "Address"."""
    return _capitalize_first(text)


def snake_to_pascal_case(text: str) -> str:
    """Convert an underscore_file name to the PascalCase root class name.

    Examples:
        "user_profile" -> "UserProfile"
        "your_name_model" -> "YourNameModel"
        "userProfile" -> "UserProfile"
    """
    return "".join(_capitalize_first(word) for word in text.split("_"))


def is_valid_identifier(name: str) -> bool:
    """Check that a name can be used as a Dart class identifier."""
    return bool(_IDENTIFIER_PATTERN.match(name))
