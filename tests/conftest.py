"""Shared test fixtures for gl-mr tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gl_mr.client import GitLabClient
from gl_mr.models import Config

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_GITLAB_URL = "https://gitlab.example.com"
MOCK_API_URL = f"{MOCK_GITLAB_URL}/api/v4"
MOCK_PROJECT_ID = 42
MOCK_MR_URL = f"{MOCK_API_URL}/projects/{MOCK_PROJECT_ID}/merge_requests"
MOCK_LINK = "https://meteor.example.com/task/"


@pytest.fixture
def sample_env() -> dict[str, str]:
    """A complete, valid environment."""
    return {
        "GL_URL": MOCK_GITLAB_URL,
        "GL_PRIVATE_TOKEN": "test-token",
        "GL_ASSIGNEE_ID": "7",
        "GL_PROJECT_ID": str(MOCK_PROJECT_ID),
        "GL_REVIEWER_IDS": "11,3,25",
        "GL_TARGET_BRANCHES": "dev,staging",
        "METEOR_LINK": MOCK_LINK,
        "USER_PREFIX": "[J]",
    }


@pytest.fixture
def sample_config() -> Config:
    """Config matching sample_env."""
    return Config(
        gitlab_url=MOCK_GITLAB_URL,
        private_token="test-token",
        assignee_id=7,
        project_id=MOCK_PROJECT_ID,
        reviewer_ids=[11, 3, 25],
        target_branches=["dev", "staging"],
        link=MOCK_LINK,
        user_prefix="[J]",
    )


@pytest.fixture
def mock_client():
    """GitLabClient pointing at mock server."""
    return GitLabClient(MOCK_GITLAB_URL, "test-token", dry_run=False)


@pytest.fixture
def dry_run_client():
    """GitLabClient in dry-run mode."""
    return GitLabClient(MOCK_GITLAB_URL, "test-token", dry_run=True)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers added by setup_logging() so tests don't write to stale streams."""
    yield
    logger = logging.getLogger("gl-mr")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
