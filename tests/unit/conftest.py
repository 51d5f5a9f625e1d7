"""Unit test fixtures."""

from __future__ import annotations

import pytest

from bibmerge.sources.base import SourceConfig


# ============================================================================
# Source Configuration Fixtures
# ============================================================================


@pytest.fixture
def source_config() -> SourceConfig:
    """Create a source config for testing."""
    return SourceConfig(
        api_key="test-api-key",
        timeout=5.0,
        user_agent="bibmerge-tests",
    )
