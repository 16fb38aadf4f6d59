"""Configuration loading from environment variables and .env files."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv

from gl_mr.models import (
    ENV_ASSIGNEE_ID,
    ENV_GITLAB_URL,
    ENV_LINK,
    ENV_PRIVATE_TOKEN,
    ENV_PROJECT_ID,
    ENV_REVIEWER_IDS,
    ENV_TARGET_BRANCHES,
    ENV_USER_PREFIX,
    Config,
    ConfigResult,
)

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Ids are 64-bit signed integers
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def load_env_file(path: str | None = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Variables already set in the environment win. Without a path, the file is
    searched for upward from the current working directory. Returns False if
    no file was loaded.
    """
    logger = logging.getLogger("gl-mr")
    dotenv_path = path or find_dotenv(usecwd=True)
    if not dotenv_path:
        logger.debug("No .env file found")
        return False
    logger.debug(f"Loading environment from {dotenv_path}")
    return load_dotenv(dotenv_path, override=False)


def split_csv(value: str) -> list[str]:
    """Split a comma-separated value. An empty string gives ``[""]``."""
    return value.split(",")


def parse_int(name: str, value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"{name} is out of range, got {value!r}")
    return number


def load_config(environ: Mapping[str, str] | None = None) -> ConfigResult:
    """Build a Config from the environment, reporting the first malformed value."""
    env = os.environ if environ is None else environ

    try:
        assignee_id = parse_int(ENV_ASSIGNEE_ID, env.get(ENV_ASSIGNEE_ID, ""))
        project_id = parse_int(ENV_PROJECT_ID, env.get(ENV_PROJECT_ID, ""))
        reviewer_ids = [parse_int(ENV_REVIEWER_IDS, item) for item in split_csv(env.get(ENV_REVIEWER_IDS, ""))]
    except ValueError as e:
        return ConfigResult(error=str(e))

    config = Config(
        gitlab_url=env.get(ENV_GITLAB_URL, ""),
        private_token=env.get(ENV_PRIVATE_TOKEN, ""),
        assignee_id=assignee_id,
        project_id=project_id,
        reviewer_ids=reviewer_ids,
        target_branches=split_csv(env.get(ENV_TARGET_BRANCHES, "")),
        link=env.get(ENV_LINK, ""),
        user_prefix=env.get(ENV_USER_PREFIX, ""),
    )
    return ConfigResult(config=config)
