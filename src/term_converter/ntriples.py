"""
N-Triple value encoding.

Converts plain values to their N-Triple form when they are not already
encoded:

- ``http://resource`` encodes to ``<http://resource>``
- ``"Literal title"@en`` is left untouched
- ``<http://resource>`` is left untouched

Literal escaping is not handled here; anything starting with a quote is
assumed to be a complete literal.
"""

from typing import List, Optional, Sequence, Union

from .constants import NTripleMarkers
from .string_utils import is_blank, is_not_blank


def to_ntriple_value(value: Optional[str]) -> Optional[str]:
    """
    Encode a value as an N-Triple IRI unless it is a literal or already encoded.
    
    Args:
        value: The value to encode
        
    Returns:
        The encoded value, or None for blank input
    """
    if is_blank(value):
        return None
    if value.startswith(NTripleMarkers.LITERAL_START):
        # Do not convert literals
        return value
    if value.startswith(NTripleMarkers.IRI_START):
        # Probably already encoded
        return value
    return f"{NTripleMarkers.IRI_START}{value}{NTripleMarkers.IRI_END}"


def to_ntriple_values(
    values: Union[Optional[str], Sequence[Optional[str]]]
) -> Union[Optional[str], List[str]]:
    """
    Encode one or many values as N-Triple values.
    
    Blank entries of a sequence are dropped, the rest keeps its order.
    A single value is delegated to :func:`to_ntriple_value`.
    
    Args:
        values: A value or a list/tuple of values
        
    Returns:
        The encoded value, or a list of encoded values
    """
    if isinstance(values, (list, tuple)):
        return [
            to_ntriple_value(value)
            for value in values
            if is_not_blank(value)
        ]
    return to_ntriple_value(values)
