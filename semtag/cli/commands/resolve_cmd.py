"""Resolve command - report the last release of a commit."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer

from semtag.cli.commands._helpers import exit_on_error
from semtag.cli.context import CLIContext, build_context
from semtag.core.errors import ErrorCode
from semtag.grammar import build_grammar
from semtag.output.console import Style
from semtag.release.model import ReleaseInformation
from semtag.release.resolver import ReleaseResolver


def resolve(
    ref: str = typer.Option("HEAD", "--ref", "-r", help="Commit to resolve"),
    repo: Path = typer.Option(Path("."), "--repo", help="Repository root"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: <repo>/semtag.toml)"
    ),
    tag_prefix: str | None = typer.Option(None, "--tag-prefix", help="Release tag prefix"),
    namespace: str | None = typer.Option(None, "--namespace", help="Release tag namespace"),
    use_branches: bool | None = typer.Option(
        None,
        "--use-branches/--use-tags",
        help="Look for release branches instead of tags",
        show_default=False,
    ),
    branch_prefix: str | None = typer.Option(
        None, "--branch-prefix", help="Release branch prefix"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Find the last release merged into a commit."""
    ctx = build_context(repo, config, console_to_stderr=as_json)
    release = ctx.config.with_overrides(
        tag_prefix=tag_prefix,
        namespace=namespace,
        use_branches=use_branches,
        branch_prefix=branch_prefix,
    ).release

    resolver = ReleaseResolver(ctx.repository, ctx.console, use_branches=release.use_branches)
    result = asyncio.run(resolver.resolve(ref, build_grammar(release)))
    exit_on_error(result, ctx, ErrorCode.GIT_ERROR)
    info = result.unwrap()

    if as_json:
        typer.echo(json.dumps(info.as_dict()))
    else:
        _print_summary(ctx, ref, info)


def _print_summary(ctx: CLIContext, ref: str, info: ReleaseInformation) -> None:
    console = ctx.console
    console.header(f"Release information for {ref}")
    if info.has_prior_release:
        console.print(f"last release: {info.version}")
        console.print(f"root: {info.root}")
    else:
        console.print(f"last release: none (using {info.version})")
    if info.current is not None:
        console.success(f"tagged as {info.current}")
    else:
        console.print("not tagged", Style.DIM)
