"""GitHub issue filing for failed registry validation

Best effort: network, auth, and API errors are logged and reported as None,
never raised, so they cannot change the validation exit status.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

import httpx
import structlog


logger = structlog.get_logger()

GITHUB_API_BASE = "https://api.github.com"
REPOSITORY_ENV = "GITHUB_REPOSITORY"
TOKEN_ENV = "GITHUB_TOKEN"


class GitHubIssueNotifier:
    """Create issues in one repository using a token."""

    def __init__(
        self,
        repository: str,
        token: str,
        labels: list[str] | None = None,
        api_url: str = GITHUB_API_BASE,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the notifier.

        Args:
            repository: "owner/repo", as in the GITHUB_REPOSITORY variable of GitHub Actions.
            token: Token with permission to create issues.
            labels: Labels attached to every created issue.
            api_url: API base URL (GitHub Enterprise installs differ).
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests.
        """
        self.repository = repository
        self._token = token
        self.labels = list(labels or [])
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        **kwargs,
    ) -> GitHubIssueNotifier | None:
        """Build a notifier when both GITHUB_REPOSITORY and GITHUB_TOKEN are set, else None."""
        env = os.environ if env is None else env
        repository = env.get(REPOSITORY_ENV)
        token = env.get(TOKEN_ENV)
        if not repository or not token:
            return None
        return cls(repository, token, **kwargs)

    @property
    def issues_url(self) -> str:
        return f"{self.api_url}/repos/{self.repository}/issues"

    def _client(self) -> httpx.Client:
        return httpx.Client(
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            transport=self._transport,
        )

    def create_issue(self, title: str, body: str) -> str | None:
        """POST a new issue. Returns its html_url, or None on any failure."""
        if self.repository.count("/") != 1:
            logger.warning("issue_repository_invalid", repository=self.repository)
            return None

        payload = {"title": title, "body": body, "labels": self.labels}
        try:
            with self._client() as client:
                response = client.post(self.issues_url, json=payload)
        except httpx.HTTPError as e:
            logger.warning("issue_request_failed", repository=self.repository, error=str(e))
            return None

        if not response.is_success:
            logger.warning(
                "issue_create_failed",
                repository=self.repository,
                status=response.status_code,
                detail=response.text[:500],
            )
            return None

        try:
            data = response.json()
        except ValueError:
            data = None
        url = data.get("html_url") if isinstance(data, dict) else None
        logger.info("issue_created", repository=self.repository, url=url)
        return url
