"""GitHub release data models.

Raw models mirror the GraphQL response nodes. Normalized models are the
shape written to the output file.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawAsset:
    """A release asset as returned by the GraphQL API."""

    id: str
    name: str
    size: int
    download_url: str
    content_type: str

    @classmethod
    def from_api_response(cls, data: dict) -> "RawAsset":
        """Create RawAsset from a ``releaseAssets`` node."""
        return cls(
            id=data["id"],
            name=data["name"],
            size=int(data["size"]),
            download_url=data["downloadUrl"],
            content_type=data.get("contentType") or "",
        )


@dataclass(frozen=True)
class RawRelease:
    """A release node as returned by the GraphQL API."""

    id: str
    name: str
    tag_name: str
    published_at: str | None
    is_prerelease: bool
    is_draft: bool
    url: str
    description: str
    asset_total_count: int = 0
    assets: tuple[RawAsset, ...] = ()

    @classmethod
    def from_api_response(cls, data: dict) -> "RawRelease":
        """Create RawRelease from a ``releases`` node."""
        release_assets = data.get("releaseAssets") or {}
        assets = tuple(
            RawAsset.from_api_response(a) for a in release_assets.get("nodes") or []
        )
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            tag_name=data.get("tagName") or "",
            published_at=data.get("publishedAt"),
            is_prerelease=bool(data.get("isPrerelease", False)),
            is_draft=bool(data.get("isDraft", False)),
            url=data.get("url") or "",
            description=data.get("description") or "",
            asset_total_count=int(release_assets.get("totalCount") or 0),
            assets=assets,
        )


@dataclass
class NormalizedAsset:
    """Asset entry of the output file."""

    id: str
    name: str
    size: int
    size_formatted: str
    content_type: str
    download_url: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "size": self.size,
            "sizeFormatted": self.size_formatted,
            "contentType": self.content_type,
            "downloadUrl": self.download_url,
        }


@dataclass
class NormalizedRelease:
    """Release entry of the output file."""

    id: str
    name: str
    version: str
    published_at: str | None
    is_prerelease: bool
    is_draft: bool
    url: str
    description: str
    download_count: int
    assets: list[NormalizedAsset] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "publishedAt": self.published_at,
            "isPrerelease": self.is_prerelease,
            "isDraft": self.is_draft,
            "url": self.url,
            "description": self.description,
            "downloadCount": self.download_count,
            "assets": [asset.to_dict() for asset in self.assets],
        }
