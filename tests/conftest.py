"""Test configuration and fixtures for the catalog service."""

from tests.fixtures import *  # noqa: F401,F403
