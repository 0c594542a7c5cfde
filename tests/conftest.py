"""Shared pytest fixtures for docreflect tests."""

import os
from unittest.mock import patch

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from docreflect.core.config import ReflectorConfig

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


@pytest.fixture
def default_config() -> ReflectorConfig:
    """Provide a configuration built from defaults only."""
    with patch.dict(os.environ, {}, clear=True):
        return ReflectorConfig(_env_file=None)
