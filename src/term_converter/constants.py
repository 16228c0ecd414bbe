"""
Centralized constants for the RDF Term Converter.

This module provides a single source of truth for the lexical prefixes used
to classify terms, the serialization formats handed to rdflib, and the
logging defaults.
"""

from typing import Final


# ============================================================================
# Term Prefixes
# ============================================================================

class TermPrefix:
    """Lexical prefixes that decide the kind of a term string."""
    
    BLANK_NODE: Final[str] = "_:"
    """Blank node labels start with this prefix."""
    
    VARIABLE: Final[str] = "?"
    """Variable names start with this prefix."""


# ============================================================================
# N-Triple Encoding
# ============================================================================

class NTripleMarkers:
    """Leading characters of values that are already N-Triple encoded."""
    
    LITERAL_START: Final[str] = '"'
    """Quoted literal, e.g. ``"title"@en``."""
    
    IRI_START: Final[str] = "<"
    """Bracketed IRI, e.g. ``<http://resource>``."""
    
    IRI_END: Final[str] = ">"


# ============================================================================
# Serialization Formats
# ============================================================================

class SerializationFormat:
    """rdflib serializer plugin names."""
    
    TURTLE: Final[str] = "turtle"
    """Used when no quad carries a graph."""
    
    TRIG: Final[str] = "trig"
    """Used as soon as any quad carries a graph."""


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Defaults for the ``logging`` section of the converter configuration."""
    
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    
    LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    """Text pattern used when the section sets no ``pattern``."""
    
    DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S"

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    
    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
