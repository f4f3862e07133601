"""Output document model."""

from dataclasses import dataclass, field

from gale.models.release import NormalizedRelease


@dataclass
class Metadata:
    """Run metadata stamped on every output file."""

    fetched_at: str
    fetched_by: str
    author: str
    url: str

    def to_dict(self) -> dict:
        return {
            "fetchedAt": self.fetched_at,
            "fetchedBy": self.fetched_by,
            "author": self.author,
            "url": self.url,
        }


@dataclass
class RepositoryInfo:
    """Coordinates and counts of the fetched repository."""

    owner: str
    repo: str
    url: str
    total_releases: int
    fetched_releases: int

    def to_dict(self) -> dict:
        return {
            "owner": self.owner,
            "repo": self.repo,
            "url": self.url,
            "totalReleases": self.total_releases,
            "fetchedReleases": self.fetched_releases,
        }


@dataclass
class OutputDocument:
    """The JSON document written to disk."""

    metadata: Metadata
    repository: RepositoryInfo
    releases: list[NormalizedRelease] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization, keeping field order."""
        return {
            "metadata": self.metadata.to_dict(),
            "repository": self.repository.to_dict(),
            "releases": [release.to_dict() for release in self.releases],
        }
