"""
Shared fixtures for hop tree tests.
"""

import pytest

from hoptree.core.settings import BuilderSettings
from hoptree.core.tree import TreeBuilder


@pytest.fixture(scope="module")
def builder() -> TreeBuilder:
    """Builder with default settings."""
    return TreeBuilder(BuilderSettings())


@pytest.fixture(scope="module")
def small_trees(builder):
    """Trees for D = 0..8, built once per module."""
    return {distance: builder.build(distance) for distance in range(9)}
