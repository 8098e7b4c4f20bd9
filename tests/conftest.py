# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from release_notes.api import app
from release_notes.pipeline import ReleaseNotesPipeline


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def pipeline() -> ReleaseNotesPipeline:
    """Fresh pipeline instance."""
    return ReleaseNotesPipeline()


@pytest.fixture
def sample_release_body() -> str:
    """A realistic GitHub release body."""
    return (
        "## What's Changed\n"
        "* Added **dark mode** support by @octocat in [#12](https://github.com/o/r/pull/12)\n"
        "* Fixed a crash on startup. Settings are now migrated automatically.\n"
        "\n"
        "<details>\n"
        "<summary>Full changelog</summary>\n"
        "\n"
        "- Internal refactoring\n"
        "</details>\n"
        "\n"
        "### Thanks\n"
        "\n"
        "\n"
        "**Full Changelog**: https://github.com/o/r/compare/v1.0.0...v1.1.0\n"
    )
