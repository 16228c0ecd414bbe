"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Serialization round trips through rdflib

Shared constants are centralized in tests/fixtures/ for reuse across all test modules.
"""

import os
import sys
import logging

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    SUBJECT,
    PREDICATE,
    OBJECT,
    GRAPH_1,
    GRAPH_2,
    SAMPLE_CONVERTER_CONFIG,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Serialization round trips through rdflib")


# =============================================================================
# Quad Fixtures
# =============================================================================

@pytest.fixture
def default_graph_quads():
    """Quads without any graph context."""
    from term_converter import get_quads, get_literal_quads
    return (
        get_quads(SUBJECT, PREDICATE, OBJECT)
        + get_literal_quads(SUBJECT, PREDICATE, "hello", language="en")
    )


@pytest.fixture
def mixed_graph_quads():
    """Quads spread over the default graph and two named graphs."""
    from term_converter import get_quads
    return (
        get_quads(SUBJECT, PREDICATE, OBJECT)
        + get_quads(SUBJECT, PREDICATE, OBJECT, [GRAPH_1, GRAPH_2])
    )


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def sample_config_dict():
    """Return a copy of the sample converter configuration."""
    import copy
    return copy.deepcopy(SAMPLE_CONVERTER_CONFIG)


@pytest.fixture
def config_file(tmp_path, sample_config_dict):
    """Write the sample configuration to a temporary JSON file."""
    import json
    path = tmp_path / "config.json"
    path.write_text(json.dumps(sample_config_dict), encoding='utf-8')
    return str(path)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a logging test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    import term_converter.logging_setup as logging_setup
    logging_setup._remove_installed_handlers()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
