"""CLI entry point for gale."""

import os
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from pathlib import Path

import click
from rich.markup import escape

from gale.core.background import run_in_background
from gale.core.config import (
    DEFAULT_COUNT,
    DEFAULT_OUTPUT,
    DEFAULT_TIMEOUT,
    TOKEN_ENV_VAR,
    GaleConfig,
)
from gale.core.github import GitHubClient, GitHubError
from gale.core.normalizer import normalize_releases
from gale.core.output import OutputError, assemble_document, write_document
from gale.ui import Presenter, format_published_date


def run(config: GaleConfig, presenter: Presenter, client: GitHubClient | None = None) -> Path:
    """Fetch releases for the configured repository and write the output file.

    Returns:
        Absolute path of the written file
    """
    if not config.quiet:
        presenter.banner()

    if not config.token:
        presenter.warning("No GitHub token provided. Rate limits may be lower.")

    if client is None:
        client = GitHubClient(token=config.token, timeout=config.timeout)

    with client:
        message = f"Fetching {config.count} releases for [bold]{escape(config.slug)}[/bold]..."
        with presenter.spinner(message):
            future = run_in_background(
                client.fetch_releases, config.owner, config.repo, config.count
            )
            result = future.result()

    releases = normalize_releases(result.releases)

    presenter.info(
        f"Found [bold]{len(releases)}[/bold] releases ([bold]{result.total_count}[/bold] total)"
    )
    if releases:
        latest = releases[0]
        presenter.info(
            f"Latest is [magenta]{escape(latest.version)}[/magenta] "
            f"published on {format_published_date(latest.published_at)}",
            icon="sparkles",
        )

    document = assemble_document(config, result, releases, datetime.now(timezone.utc))
    path = write_document(document, config.output)

    presenter.success(
        f"Success! Saved [bold]{len(releases)}[/bold] releases to "
        f"[cyan]{escape(config.output)}[/cyan]"
    )
    presenter.dim(escape(str(path)))
    return path


@click.command(add_help_option=False)
@click.argument("owner", required=False)
@click.argument("repo", required=False)
@click.option(
    "--count", "-c",
    type=click.IntRange(min=1),
    default=DEFAULT_COUNT,
    help="Number of releases to fetch",
)
@click.option("--output", "-o", default=DEFAULT_OUTPUT, help="Output file name")
@click.option("--token", "-t", default=None, help=f"GitHub token (or use {TOKEN_ENV_VAR})")
@click.option("--quiet", "-q", is_flag=True, help="Quiet mode (minimal output)")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT,
    help="Request timeout in seconds",
)
@click.option("--help", "-h", "show_help", is_flag=True, help="Show this help")
@click.option("--version", "-v", "show_version", is_flag=True, help="Show version")
def main(**params):
    """Gale - fetch GitHub releases into a JSON file.

    OWNER and REPO default to Typeflu/gale.
    """
    config = GaleConfig.from_params(params, os.environ)
    presenter = Presenter(quiet=config.quiet)

    if config.help:
        presenter.banner()
        presenter.help()
        return

    if config.version:
        presenter.version()
        return

    try:
        run(config, presenter)
    except (GitHubError, OutputError) as e:
        presenter.error(str(e))
        raise SystemExit(1)


def resolve_config(argv: Sequence[str], env: Mapping[str, str]) -> GaleConfig:
    """Parse command-line arguments into a GaleConfig.

    Raises click.UsageError for unparseable input.
    """
    with main.make_context("gale", list(argv)) as ctx:
        return GaleConfig.from_params(ctx.params, env)


if __name__ == "__main__":
    main()
