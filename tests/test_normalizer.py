"""Tests for release normalization (core/normalizer.py)."""

from __future__ import annotations

from gale.core.normalizer import UNNAMED_RELEASE, normalize_release, normalize_releases
from gale.models.release import RawAsset, RawRelease


def _release(
    *,
    id: str = "1",
    name: str = "Release",
    tag_name: str = "v4.4.0",
    assets: tuple[RawAsset, ...] = (),
    asset_total_count: int | None = None,
) -> RawRelease:
    return RawRelease(
        id=id,
        name=name,
        tag_name=tag_name,
        published_at="2025-01-01T00:00:00Z",
        is_prerelease=False,
        is_draft=False,
        url=f"https://github.com/Typeflu/gale/releases/tag/{tag_name}",
        description="",
        asset_total_count=len(assets) if asset_total_count is None else asset_total_count,
        assets=assets,
    )


def _asset(id: str = "asset1", size: int = 1024) -> RawAsset:
    return RawAsset(
        id=id,
        name=f"{id}.zip",
        size=size,
        download_url=f"https://example.com/{id}.zip",
        content_type="application/zip",
    )


class TestNameFallback:
    def test_keeps_release_name(self) -> None:
        assert normalize_release(_release(name="Release")).name == "Release"

    def test_falls_back_to_tag(self) -> None:
        assert normalize_release(_release(name="", tag_name="v4.4.1")).name == "v4.4.1"

    def test_falls_back_to_placeholder(self) -> None:
        assert normalize_release(_release(name="", tag_name="")).name == UNNAMED_RELEASE
        assert UNNAMED_RELEASE == "Unnamed Release"

    def test_version_is_tag(self) -> None:
        assert normalize_release(_release(tag_name="v2.0.0")).version == "v2.0.0"


class TestAssets:
    def test_size_formatted(self) -> None:
        normalized = normalize_release(_release(assets=(_asset(size=1024),)))
        asset = normalized.assets[0]
        assert asset.size == 1024
        assert asset.size_formatted == "1.0 KB"
        assert asset.content_type == "application/zip"

    def test_zero_assets_give_empty_list(self) -> None:
        normalized = normalize_release(_release(assets=()))
        assert normalized.assets == []

    def test_download_count_uses_reported_total(self) -> None:
        normalized = normalize_release(
            _release(assets=(_asset("a"), _asset("b")), asset_total_count=120)
        )
        assert normalized.download_count == 120
        assert len(normalized.assets) == 2


class TestNormalizeReleases:
    def test_preserves_length_and_order(self) -> None:
        nodes = [
            _release(id="1", assets=(_asset(),)),
            _release(id="2", name="", tag_name="v4.4.1"),
            _release(id="3", name="", tag_name=""),
        ]
        result = normalize_releases(nodes)
        assert [r.id for r in result] == ["1", "2", "3"]
        assert [r.name for r in result] == ["Release", "v4.4.1", "Unnamed Release"]

    def test_empty_input(self) -> None:
        assert normalize_releases([]) == []

    def test_does_not_mutate_input(self) -> None:
        node = _release(name="")
        normalize_release(node)
        assert node.name == ""
