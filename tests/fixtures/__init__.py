"""
Centralized test fixtures for the term converter test suite.

Usage:
    from fixtures import SUBJECT, PREDICATE, OBJECT, GRAPH_1, GRAPH_2
"""

from .quad_fixtures import (
    SUBJECT,
    PREDICATE,
    OBJECT,
    GRAPH_1,
    GRAPH_2,
    XSD_INTEGER,
    XSD_STRING,
)

from .config_fixtures import (
    SAMPLE_CONVERTER_CONFIG,
    MINIMAL_CONVERTER_CONFIG,
)

__all__ = [
    'SUBJECT',
    'PREDICATE',
    'OBJECT',
    'GRAPH_1',
    'GRAPH_2',
    'XSD_INTEGER',
    'XSD_STRING',
    'SAMPLE_CONVERTER_CONFIG',
    'MINIMAL_CONVERTER_CONFIG',
]
