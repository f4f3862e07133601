"""GitHub GraphQL client for fetching releases."""

import json
import time
from dataclasses import dataclass

import httpx

from gale import __version__
from gale.core.config import DEFAULT_TIMEOUT
from gale.models.release import RawRelease


GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = f"gale/{__version__} (+https://github.com/Typeflu)"
MAX_ASSETS_PER_RELEASE = 50

RELEASES_QUERY = """
query ($owner: String!, $repo: String!, $first: Int!) {
  repository(owner: $owner, name: $repo) {
    releases(first: $first, orderBy: { field: CREATED_AT, direction: DESC }) {
      totalCount
      nodes {
        id
        name
        tagName
        publishedAt
        isPrerelease
        isDraft
        url
        description
        releaseAssets(first: %d) {
          totalCount
          nodes {
            id
            name
            size
            downloadUrl
            contentType
          }
        }
      }
    }
  }
}""" % MAX_ASSETS_PER_RELEASE


class GitHubError(Exception):
    """Error from GitHub API."""

    pass


class TransportError(GitHubError):
    """The request never produced an HTTP response."""

    def __init__(self, cause: Exception):
        super().__init__(f"Failed to send request to GitHub API: {cause}")
        self.cause = cause


class RemoteRejectedError(GitHubError):
    """GitHub answered with an HTTP error status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"GitHub API responded with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(GitHubError):
    """The response body is not the JSON envelope we asked for."""

    pass


class QueryErrors(GitHubError):
    """GraphQL returned an ``errors`` list alongside a 200 response."""

    def __init__(self, messages: list[str]):
        lines = "\n".join(f"- {message}" for message in messages)
        super().__init__(f"GraphQL returned errors:\n{lines}")
        self.messages = messages


class RepositoryNotFoundError(GitHubError):
    """The repository is missing from an otherwise clean response."""

    def __init__(self, owner: str, repo: str):
        super().__init__("repository not found or access denied")
        self.owner = owner
        self.repo = repo


@dataclass(frozen=True)
class QueryVariables:
    """Variables of the releases query."""

    owner: str
    repo: str
    first: int

    def __post_init__(self):
        if not self.owner or not self.repo:
            raise ValueError("Owner and repo must not be empty")
        if isinstance(self.first, bool) or not isinstance(self.first, int):
            raise ValueError(f"Release count must be an integer, got {self.first!r}")
        if self.first < 1:
            raise ValueError(f"Release count must be at least 1, got {self.first}")

    def to_dict(self) -> dict:
        return {"owner": self.owner, "repo": self.repo, "first": self.first}


@dataclass(frozen=True)
class ReleaseQueryResult:
    """Successful outcome of a releases query."""

    total_count: int
    releases: tuple[RawRelease, ...]


class GitHubClient:
    """Client for the GitHub GraphQL API."""

    def __init__(
        self,
        token: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        api_url: str = GITHUB_GRAPHQL_URL,
        transport: httpx.BaseTransport | None = None,
    ):
        headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"bearer {token}"

        self.api_url = api_url
        self.timeout = timeout
        self.client = httpx.Client(
            headers=headers,
            timeout=timeout,
            limits=httpx.Limits(
                max_connections=10,
                max_keepalive_connections=10,
                keepalive_expiry=30.0,
            ),
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.client.close()

    def fetch_releases(self, owner: str, repo: str, count: int) -> ReleaseQueryResult:
        """Fetch the latest ``count`` releases of ``owner/repo``.

        A single request is made; the first failure is raised as a
        GitHubError subclass.
        """
        variables = QueryVariables(owner=owner, repo=repo, first=count)
        payload = self._post({"query": RELEASES_QUERY, "variables": variables.to_dict()})

        errors = payload.get("errors")
        if errors:
            raise QueryErrors([_error_message(e) for e in errors])

        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise ResponseDecodeError("Unexpected 'data' field in GitHub API response")
        repository = data.get("repository")
        if repository is None:
            raise RepositoryNotFoundError(owner, repo)

        return _parse_releases(repository)

    def _post(self, body: dict) -> dict:
        """Send one GraphQL request and decode the JSON envelope.

        ``self.timeout`` bounds each connect/read/write step and also the
        whole exchange, including a body that arrives slowly.
        """
        deadline = time.monotonic() + self.timeout
        try:
            with self.client.stream("POST", self.api_url, json=body) as response:
                content = self._read_body(response, deadline)
        except httpx.HTTPError as e:
            raise TransportError(e) from e

        if response.status_code >= 400:
            raise RemoteRejectedError(
                response.status_code, content.decode("utf-8", errors="replace")
            )

        try:
            payload = json.loads(content)
        except ValueError as e:
            raise ResponseDecodeError(f"Failed to decode GitHub API response: {e}") from e

        if not isinstance(payload, dict):
            raise ResponseDecodeError("GitHub API response is not a JSON object")
        return payload

    def _read_body(self, response: httpx.Response, deadline: float) -> bytes:
        chunks = []
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            if time.monotonic() > deadline:
                break
        if time.monotonic() > deadline:
            raise TransportError(
                httpx.ReadTimeout(
                    f"request exceeded the overall timeout of {self.timeout}s",
                    request=response.request,
                )
            )
        return b"".join(chunks)


def _error_message(error) -> str:
    if isinstance(error, dict):
        return str(error.get("message", error))
    return str(error)


def _parse_releases(repository: dict) -> ReleaseQueryResult:
    """Build a ReleaseQueryResult from the ``repository`` object."""
    try:
        releases = repository["releases"]
        nodes = tuple(RawRelease.from_api_response(n) for n in releases.get("nodes") or [])
        total_count = int(releases.get("totalCount") or 0)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ResponseDecodeError(f"Failed to decode GitHub API response: {e!r}") from e
    return ReleaseQueryResult(total_count=total_count, releases=nodes)
