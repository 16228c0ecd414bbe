"""
String helpers shared by the term converter.
"""

from typing import Any


def is_blank(value: Any) -> bool:
    """
    Check whether a value is None, empty or whitespace only.
    
    Args:
        value: The value to check
        
    Returns:
        True if the value carries no text, False otherwise
    """
    if value is None:
        return True
    return not str(value).strip()


def is_not_blank(value: Any) -> bool:
    """Inverse of :func:`is_blank`."""
    return not is_blank(value)
