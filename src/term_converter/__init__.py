"""
RDF Term Converter - strings to RDF terms, quads and Turtle/TriG text.

Usage:
    from term_converter import get_quads, get_literal_quads, to_string
    
    quads = get_quads("http://s", "http://p", "http://o", ["http://g1", "http://g2"])
    quads += get_literal_quads("http://s", "http://p", "hello", language="en")
    text = to_string(quads)
    
    from term_converter import to_ntriple_value
    to_ntriple_value("http://x")  # '<http://x>'
"""

from .config import ConverterConfig
from .logging_setup import JSONFormatter, setup_logging
from .models import Quad, Term, TermKind
from .ntriples import to_ntriple_value, to_ntriple_values
from .serializer import (
    QuadWriter,
    SerializationError,
    WriterClosedError,
    to_string,
)
from .string_utils import is_blank, is_not_blank
from .term_converter import TermConverter, get_literal_quads, get_quads

__version__ = "1.0.0"

__all__ = [
    # Conversion
    'TermConverter',
    'get_quads',
    'get_literal_quads',
    # Serialization
    'QuadWriter',
    'to_string',
    'SerializationError',
    'WriterClosedError',
    # N-Triple encoding
    'to_ntriple_value',
    'to_ntriple_values',
    # Models
    'Quad',
    'Term',
    'TermKind',
    # Configuration and logging
    'ConverterConfig',
    'setup_logging',
    'JSONFormatter',
    # Helpers
    'is_blank',
    'is_not_blank',
]
