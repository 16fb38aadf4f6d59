"""GitLab API client for merge request creation."""

from __future__ import annotations

import logging

import requests

from gl_mr.models import API_V4


class GitLabClient:
    """Thin wrapper around GitLab REST API v4. Requests are sent once, without retries."""

    def __init__(self, base_url: str, token: str, dry_run: bool = False):
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{API_V4}"
        self.session = requests.Session()
        self.session.headers.update(
            {
                "PRIVATE-TOKEN": token,
                "Content-Type": "application/json",
            }
        )
        self.dry_run = dry_run
        self.logger = logging.getLogger("gl-mr")

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Send a single HTTP request. HTTP error statuses are returned, not raised."""
        url = f"{self.api_url}{endpoint}"
        self.logger.debug(f"{method.upper()} {url}")
        with self.session.request(method, url, **kwargs) as resp:
            if resp.status_code >= 400:
                self.logger.debug(f"API error {resp.status_code}: {resp.text[:500]}")
            return resp

    def post(self, endpoint: str, body: bytes) -> requests.Response:
        return self._request("POST", endpoint, data=body)

    def create_merge_request(self, project_id: int, body: bytes) -> requests.Response:
        """POST a UTF-8 encoded JSON merge request payload to the project."""
        return self.post(f"/projects/{project_id}/merge_requests", body)

    def close(self) -> None:
        self.session.close()
