"""Merge request dispatch across the configured target branches."""

from __future__ import annotations

import json
import logging

import requests

from gl_mr.builder import build_draft
from gl_mr.client import GitLabClient
from gl_mr.models import HTTP_CREATED, Config, DispatchResult, MergeRequestDraft

# Errors raised before anything is sent. Header values outside latin-1
# surface as UnicodeError from http.client.
REQUEST_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
    UnicodeError,
)


class MergeRequestDispatcher:
    """Creates one merge request per target branch, recording each outcome independently."""

    def __init__(self, client: GitLabClient, config: Config):
        self.client = client
        self.config = config
        self.logger = logging.getLogger("gl-mr")
        self.results: list[DispatchResult] = []

    def run(self, task_name: str, source_branch: str) -> list[DispatchResult]:
        """Dispatch a merge request from source_branch into every target branch, in order."""
        for target_branch in self.config.target_branches:
            draft = build_draft(self.config, task_name, source_branch, target_branch)
            self.logger.info(f"|{target_branch}|{draft.title}")
            self.create_merge_request(draft)
        return self.results

    def create_merge_request(self, draft: MergeRequestDraft) -> DispatchResult:
        payload = draft.to_payload()
        try:
            body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            return self._error(draft, f"could not serialize payload: {e}")

        self.logger.debug(f"|{draft.target_branch}|payload: {payload}")
        if self.client.dry_run:
            return self._record(
                DispatchResult(
                    target_branch=draft.target_branch,
                    title=draft.title,
                    action="would_create",
                    dry_run=True,
                )
            )

        try:
            resp = self.client.create_merge_request(self.config.project_id, body)
        except REQUEST_BUILD_ERRORS as e:
            return self._error(draft, f"could not build request: {e}")
        except requests.RequestException as e:
            return self._error(draft, f"request failed: {e}")

        if resp.status_code != HTTP_CREATED:
            return self._error(draft, f"unexpected status {resp.status_code} {resp.reason}")

        return self._record(
            DispatchResult(
                target_branch=draft.target_branch,
                title=draft.title,
                action="created",
            )
        )

    def _error(self, draft: MergeRequestDraft, detail: str) -> DispatchResult:
        return self._record(
            DispatchResult(
                target_branch=draft.target_branch,
                title=draft.title,
                action="error",
                detail=detail,
            ),
            level=logging.ERROR,
        )

    def _record(self, result: DispatchResult, level: int = logging.INFO) -> DispatchResult:
        self.results.append(result)
        message = {
            "created": "merge request created",
            "would_create": "merge request would be created",
            "error": "merge request not created",
        }.get(result.action, result.action)
        prefix = "[DRY-RUN] " if result.dry_run else ""
        self.logger.log(
            level,
            f"{prefix}|{result.target_branch}|{message}{': ' + result.detail if result.detail else ''}",
            extra={"dispatch_result": result},
        )
        return result
