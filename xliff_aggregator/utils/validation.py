"""
Input validation utilities for the XLIFF aggregation plugin.

Provides reusable validation functions for locale specs, file paths and
resource keys coming from configuration files and the command line.
"""

import re


class ValidationError(ValueError):
    """Raised when input validation fails."""
    pass


# language[-Script][-REGION], e.g. "en", "en-US", "zh-Hans-CN", "es-419"
LOCALE_SPEC_PATTERN = re.compile(r'^[a-z]{2,3}(-[A-Z][a-z]{3})?(-([A-Z]{2}|[0-9]{3}))?$')

# Characters XML 1.0 documents cannot carry
XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def validate_locale_spec(locale_spec: str, field_name: str = "locale") -> str:
    """
    Validate a BCP-47 style locale spec.

    Args:
        locale_spec: The locale spec to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated locale spec (stripped of whitespace)

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_locale_spec("en-US")
        'en-US'
        >>> validate_locale_spec("zh-Hans-CN")
        'zh-Hans-CN'
        >>> validate_locale_spec("en_US")  # doctest: +SKIP
        ValidationError: locale is not a valid locale spec
    """
    if not locale_spec or not isinstance(locale_spec, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    locale_spec = locale_spec.strip()

    if not LOCALE_SPEC_PATTERN.match(locale_spec):
        raise ValidationError(
            f"{field_name} '{locale_spec}' is not a valid locale spec. "
            "Expected language[-Script][-REGION], e.g. 'en-US'."
        )

    return locale_spec


def validate_resource_key(reskey: str, field_name: str = "reskey") -> str:
    """
    Validate a resource key.

    Resource keys may contain any printable text but must not be empty
    or contain control characters that XLIFF cannot carry.

    Args:
        reskey: The key to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated key (unchanged)

    Raises:
        ValidationError: If validation fails
    """
    if not reskey or not isinstance(reskey, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    if not reskey.strip():
        raise ValidationError(f"{field_name} cannot be empty or whitespace-only")

    if XML_INVALID_CHARS.search(reskey):
        raise ValidationError(f"{field_name} contains control characters")

    return reskey


def validate_file_path(file_path: str, field_name: str = "file_path", allow_wildcards: bool = False) -> str:
    """
    Validate a file path for security.

    Prevents path traversal and ensures the path is reasonable.

    Args:
        file_path: The file path to validate
        field_name: Name of the field (for error messages)
        allow_wildcards: Whether to allow wildcards (* and ?) in the path

    Returns:
        The validated file path (stripped of whitespace)

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_file_path("en-US.xliff")
        'en-US.xliff'
        >>> validate_file_path("../../../etc/passwd")  # doctest: +SKIP
        ValidationError: file_path contains path traversal characters
    """
    if not file_path or not isinstance(file_path, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    file_path = file_path.strip()

    if not file_path:
        raise ValidationError(f"{field_name} cannot be empty or whitespace-only")

    if ".." in file_path.replace("\\", "/").split("/"):
        raise ValidationError(f"{field_name} contains path traversal characters (..)")

    if "\x00" in file_path:
        raise ValidationError(f"{field_name} contains null bytes")

    if not allow_wildcards and ("*" in file_path or "?" in file_path):
        raise ValidationError(
            f"{field_name} contains wildcards (* or ?). "
            "If this is intentional, set allow_wildcards=True."
        )

    if len(file_path) > 4096:  # Linux PATH_MAX
        raise ValidationError(f"{field_name} exceeds maximum length of 4096 characters")

    return file_path


def validate_xml_text(text: str | None, field_name: str = "text") -> str | None:
    """
    Validate free text that will be written into an XML document.

    Empty and missing text is allowed. Control characters other than tab,
    newline and carriage return are rejected.

    Args:
        text: The text to validate, or None
        field_name: Name of the field (for error messages)

    Returns:
        The validated text (unchanged)

    Raises:
        ValidationError: If validation fails
    """
    if text is None:
        return None

    if not isinstance(text, str):
        raise ValidationError(f"{field_name} must be a string")

    if XML_INVALID_CHARS.search(text):
        raise ValidationError(f"{field_name} contains control characters")

    return text
