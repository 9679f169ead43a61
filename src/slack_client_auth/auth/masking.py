"""Masking of secret values for logs and error messages."""

MASK = "***"

# Secrets at or below this length are hidden completely
_MIN_PARTIAL_LENGTH = 8
_VISIBLE_CHARS = 4


def mask_credential(value: str) -> str:
    """Mask a credential value for safe display.

    Short values (8 characters or fewer, including the empty string) are
    replaced entirely by ``***``. Longer values keep their first and last
    four characters around the mask.

    Args:
        value: The secret to mask. Its format is not validated.

    Returns:
        The masked string.

    Example:
        ```python
        mask_credential("xoxc-123456789")  # "xoxc***6789"
        mask_credential("12345678")  # "***"
        ```
    """
    if len(value) <= _MIN_PARTIAL_LENGTH:
        return MASK
    return f"{value[:_VISIBLE_CHARS]}{MASK}{value[-_VISIBLE_CHARS:]}"
