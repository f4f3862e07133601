"""Run configuration for gale."""

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_OWNER = "Typeflu"
DEFAULT_REPO = "gale"
DEFAULT_COUNT = 10
DEFAULT_OUTPUT = "releases.json"
DEFAULT_TIMEOUT = 30.0
TOKEN_ENV_VAR = "GITHUB_TOKEN"


@dataclass(frozen=True)
class GaleConfig:
    """Configuration for a single gale run."""

    owner: str = DEFAULT_OWNER
    repo: str = DEFAULT_REPO
    count: int = DEFAULT_COUNT
    output: str = DEFAULT_OUTPUT
    token: str = ""
    quiet: bool = False
    help: bool = False
    version: bool = False
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_params(cls, params: Mapping, env: Mapping[str, str]) -> "GaleConfig":
        """Create config from parsed CLI parameters and the environment.

        Positional owner/repo fall back to the defaults, and the token
        falls back to ``GITHUB_TOKEN``.
        """
        token = params.get("token")
        if token is None:
            token = env.get(TOKEN_ENV_VAR, "")
        return cls(
            owner=params.get("owner") or DEFAULT_OWNER,
            repo=params.get("repo") or DEFAULT_REPO,
            count=params.get("count", DEFAULT_COUNT),
            output=params.get("output", DEFAULT_OUTPUT),
            token=token,
            quiet=bool(params.get("quiet", False)),
            help=bool(params.get("show_help", False)),
            version=bool(params.get("show_version", False)),
            timeout=params.get("timeout", DEFAULT_TIMEOUT),
        )

    @property
    def slug(self) -> str:
        """Repository in owner/repo format."""
        return f"{self.owner}/{self.repo}"
