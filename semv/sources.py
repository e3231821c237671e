"""Tag sources: where the raw tag strings come from."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Protocol, Union

import requests

from .errors import TagSourceError
from .vcs.git import list_local_tags


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
PER_PAGE = 100


class TagSource(Protocol):
    """Lists the tag names of a repository."""

    def list_tags(self, repository: str) -> List[str]: ...


class GitHubTagSource:
    """List tags through the GitHub REST API.

    ``repository`` is ``owner/name``. Pages are followed through the
    ``Link`` header until exhausted.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/") if api_url else DEFAULT_API_URL
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get(self, url: str, params: Optional[dict[str, Any]] = None) -> requests.Response:
        try:
            response = self.session.get(url, params=params, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
            return response
        except requests.exceptions.HTTPError as e:
            error_msg = f"API request failed: {e}"
            try:
                error_data = e.response.json()
                if "message" in error_data:
                    error_msg = f"API error: {error_data['message']}"
            except Exception:
                pass
            raise TagSourceError(error_msg) from e
        except requests.exceptions.RequestException as e:
            raise TagSourceError(f"Request failed: {e}") from e

    def list_tags(self, repository: str) -> List[str]:
        repository = repository.strip().strip("/")
        if repository.count("/") != 1:
            raise TagSourceError(f"Repository must be given as owner/name, got {repository!r}")

        url: Optional[str] = f"{self.api_url}/repos/{repository}/tags"
        params: Optional[dict[str, Any]] = {"per_page": PER_PAGE}
        tags: List[str] = []
        while url:
            logger.info(f"Fetching tags from {url}")
            response = self._get(url, params=params)
            try:
                payload = response.json()
            except ValueError as e:
                raise TagSourceError(f"Invalid JSON from {url}: {e}") from e
            if not isinstance(payload, list):
                raise TagSourceError(f"Unexpected response from {url}: expected a list of tags")
            tags.extend(item["name"] for item in payload if isinstance(item, dict) and "name" in item)
            url = response.links.get("next", {}).get("url")
            # the next link already carries the query string
            params = None
        logger.info(f"Fetched {len(tags)} tags for {repository}")
        return tags


class LocalGitTagSource:
    """List tags of a local git checkout; the repository argument is ignored."""

    def __init__(self, cwd: Optional[Union[str, Path]] = None):
        self.cwd = cwd

    def list_tags(self, repository: str = "") -> List[str]:
        tags = list_local_tags(self.cwd)
        logger.info(f"Found {len(tags)} local tags")
        return tags
