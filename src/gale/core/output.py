"""Assemble the output document and write it to disk."""

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from gale import __version__
from gale.core.config import GaleConfig
from gale.core.github import ReleaseQueryResult
from gale.models.document import Metadata, OutputDocument, RepositoryInfo
from gale.models.release import NormalizedRelease

AUTHOR = "Saksham Singla (@Typeflu)"
AUTHOR_URL = "https://github.com/Typeflu"


class OutputError(Exception):
    """Error while writing the output file."""

    pass


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as an RFC 3339 UTC timestamp, e.g. 2025-01-01T00:00:00Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def assemble_document(
    config: GaleConfig,
    result: ReleaseQueryResult,
    releases: list[NormalizedRelease],
    now: datetime,
) -> OutputDocument:
    """Wrap normalized releases with run metadata."""
    return OutputDocument(
        metadata=Metadata(
            fetched_at=format_timestamp(now),
            fetched_by=f"gale v{__version__}",
            author=AUTHOR,
            url=AUTHOR_URL,
        ),
        repository=RepositoryInfo(
            owner=config.owner,
            repo=config.repo,
            url=f"https://github.com/{config.owner}/{config.repo}",
            total_releases=result.total_count,
            fetched_releases=len(releases),
        ),
        releases=list(releases),
    )


def write_document(document: OutputDocument, output: str | Path) -> Path:
    """Write the document as pretty-printed JSON.

    The file is written to a temporary sibling and moved into place, so
    the target is left untouched when anything fails.

    Returns:
        Absolute path of the written file
    """
    try:
        path = Path(output).expanduser().absolute()
    except (OSError, RuntimeError) as e:
        raise OutputError(f"Could not resolve path {str(output)!r}: {e}") from e

    try:
        content = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise OutputError(f"Failed to serialize output JSON: {e}") from e

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.write("\n")
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise OutputError(f"Failed to write to file {output}: {e}") from e

    return path
