"""Data models and constants for gl-mr."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

API_V4 = "/api/v4"
HTTP_CREATED = 201

# Merge requests into this branch are opened ready for review, all others as drafts
NON_DRAFT_BRANCH = "dev"
DRAFT_PREFIX = "Draft: "

# Ticket ids look like "ВВ-48904" (Cyrillic letters)
TICKET_PATTERN = re.compile(r"ВВ-[0-9]+")

ENV_GITLAB_URL = "GL_URL"
ENV_PRIVATE_TOKEN = "GL_PRIVATE_TOKEN"
ENV_ASSIGNEE_ID = "GL_ASSIGNEE_ID"
ENV_PROJECT_ID = "GL_PROJECT_ID"
ENV_REVIEWER_IDS = "GL_REVIEWER_IDS"
ENV_TARGET_BRANCHES = "GL_TARGET_BRANCHES"
ENV_LINK = "METEOR_LINK"
ENV_USER_PREFIX = "USER_PREFIX"


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Config:
    """Settings for a single run, read once from the environment."""

    gitlab_url: str
    private_token: str
    assignee_id: int
    project_id: int
    reviewer_ids: list[int] = field(default_factory=list)
    target_branches: list[str] = field(default_factory=list)
    link: str = ""
    user_prefix: str = ""


@dataclass
class ConfigResult:
    """Outcome of loading the configuration: either a config or an error message."""

    config: Config | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.config is not None and self.error is None


@dataclass
class MergeRequestDraft:
    """Body of one merge request creation call."""

    source_branch: str
    target_branch: str
    title: str
    description: str
    assignee_id: int
    reviewer_ids: list[int]
    squash: bool = True

    def to_payload(self) -> dict:
        return {
            "source_branch": self.source_branch,
            "target_branch": self.target_branch,
            "title": self.title,
            "description": self.description,
            "assignee_id": self.assignee_id,
            "reviewer_ids": list(self.reviewer_ids),
            "squash": self.squash,
        }


@dataclass
class DispatchResult:
    """Result of dispatching a merge request to one target branch."""

    target_branch: str
    title: str
    action: str  # "created", "would_create", "error"
    detail: str = ""
    dry_run: bool = False

    def to_dict(self) -> dict:
        d = {
            "target_branch": self.target_branch,
            "title": self.title,
            "action": self.action,
            "detail": self.detail,
        }
        if self.dry_run:
            d["dry_run"] = True
        return d
