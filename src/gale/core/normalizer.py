"""Transform raw GraphQL release nodes into the output schema."""

from collections.abc import Iterable

from gale.core.formatting import format_bytes
from gale.models.release import NormalizedAsset, NormalizedRelease, RawAsset, RawRelease

UNNAMED_RELEASE = "Unnamed Release"


def normalize_asset(asset: RawAsset) -> NormalizedAsset:
    return NormalizedAsset(
        id=asset.id,
        name=asset.name,
        size=asset.size,
        size_formatted=format_bytes(asset.size),
        content_type=asset.content_type,
        download_url=asset.download_url,
    )


def normalize_release(node: RawRelease) -> NormalizedRelease:
    """Normalize a single release.

    The name falls back to the tag name, then to "Unnamed Release".
    ``download_count`` is the total reported by the API, which can exceed
    the number of assets actually returned.
    """
    name = node.name or node.tag_name or UNNAMED_RELEASE
    return NormalizedRelease(
        id=node.id,
        name=name,
        version=node.tag_name,
        published_at=node.published_at,
        is_prerelease=node.is_prerelease,
        is_draft=node.is_draft,
        url=node.url,
        description=node.description,
        download_count=node.asset_total_count,
        assets=[normalize_asset(asset) for asset in node.assets],
    )


def normalize_releases(nodes: Iterable[RawRelease]) -> list[NormalizedRelease]:
    """Normalize release nodes, one output per input, order preserved."""
    return [normalize_release(node) for node in nodes]
