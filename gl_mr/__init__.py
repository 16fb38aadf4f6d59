"""
gl-mr: Create GitLab merge requests into several target branches at once.

Reads its settings from the environment (optionally seeded from a .env file), builds
a title and description from a task name and a source branch, then opens one merge
request per configured target branch.

Environment:
    GL_URL, GL_PRIVATE_TOKEN, GL_ASSIGNEE_ID, GL_PROJECT_ID, GL_REVIEWER_IDS,
    GL_TARGET_BRANCHES, METEOR_LINK, USER_PREFIX
"""

from gl_mr.cli import main

__version__ = "0.1.0"
__all__ = ["main", "__version__"]
