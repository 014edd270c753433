import html
from typing import Optional


def sanitize_string(value: Optional[str]) -> Optional[str]:
    """
    Sanitize a string by escaping HTML special characters to prevent XSS.
    Returns None if input is None.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    return html.escape(str(value), quote=True)


def normalize_text(value: Optional[str], max_length: int = 500) -> Optional[str]:
    """
    Trim and length-check free text such as booking notes.
    Escaping happens when the text is rendered into an email.

    Returns:
        Stripped string, or None for empty input

    Raises:
        ValueError: If input exceeds max_length
    """
    if value is None:
        return None

    value = str(value).strip()
    if not value:
        return None

    if len(value) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    return value
