# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for table client tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import pytest
from wams_tables.core.config import ServiceConfig


@pytest.fixture
def sample_base_url():
    """Standard test table endpoint."""
    return "https://myapp.azure-mobile.net/tables/"


@pytest.fixture
def test_config(sample_base_url):
    """Configuration carrying every credential."""
    return ServiceConfig(
        service_url=sample_base_url,
        app_key="app-key",
        auth_key="auth-token",
        master_key="master-key",
    )


@pytest.fixture
def sample_record():
    """Sample record for testing."""
    return {
        "text": "Buy milk",
        "complete": False,
    }
