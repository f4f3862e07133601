"""Data models for gale."""

from gale.models.document import Metadata, OutputDocument, RepositoryInfo
from gale.models.release import (
    NormalizedAsset,
    NormalizedRelease,
    RawAsset,
    RawRelease,
)

__all__ = [
    "Metadata",
    "NormalizedAsset",
    "NormalizedRelease",
    "OutputDocument",
    "RawAsset",
    "RawRelease",
    "RepositoryInfo",
]
