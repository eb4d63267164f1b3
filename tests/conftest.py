"""Test configuration for pytest."""

import logging
import os
import pytest

from surreal import SurrealConfig, SurrealContext, SurrealFinite, set_default_context


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Keep surreal loggers quiet unless a test asks otherwise."""
    os.environ['SURREAL_LOG_LEVEL'] = 'WARNING'
    logging.getLogger('surreal').setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def fresh_default_context():
    """Every test starts with an empty default context."""
    set_default_context(None)
    yield
    set_default_context(None)


@pytest.fixture
def ctx():
    """An isolated context."""
    return SurrealContext(SurrealConfig(debug_checks=True))


@pytest.fixture
def zero(ctx):
    return SurrealFinite.new([], [], ctx)


@pytest.fixture
def one(ctx, zero):
    return SurrealFinite.new([zero], [], ctx)


@pytest.fixture
def neg_one(ctx, zero):
    return SurrealFinite.new([], [zero], ctx)


@pytest.fixture
def half(ctx, zero, one):
    return SurrealFinite.new([zero], [one], ctx)


@pytest.fixture
def two(one):
    return one + one
