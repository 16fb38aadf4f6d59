"""Title and description building for merge requests."""

from __future__ import annotations

from gl_mr.models import DRAFT_PREFIX, NON_DRAFT_BRANCH, TICKET_PATTERN, Config, MergeRequestDraft


def extract_ticket_id(task_name: str) -> str | None:
    match = TICKET_PATTERN.search(task_name)
    return match.group(0) if match else None


def build_title(task_name: str, source_branch: str, user_prefix: str, target_branch: str) -> str:
    """
    Build a merge request title.

    Ticket ids are removed from the task name, the user prefix and source branch
    are prepended, and the result is marked as a draft unless it targets the
    non-draft branch.
    """
    title = f"{user_prefix} {source_branch}{TICKET_PATTERN.sub('', task_name)}"
    if target_branch != NON_DRAFT_BRANCH:
        title = DRAFT_PREFIX + title
    return title


def build_description(task_name: str, link: str) -> str:
    """Append the first ticket id of the task name to the link, if there is one."""
    ticket_id = extract_ticket_id(task_name)
    if ticket_id is None:
        return link
    return link + ticket_id


def build_draft(config: Config, task_name: str, source_branch: str, target_branch: str) -> MergeRequestDraft:
    return MergeRequestDraft(
        source_branch=source_branch,
        target_branch=target_branch,
        title=build_title(task_name, source_branch, config.user_prefix, target_branch),
        description=build_description(task_name, config.link),
        assignee_id=config.assignee_id,
        reviewer_ids=list(config.reviewer_ids),
    )
