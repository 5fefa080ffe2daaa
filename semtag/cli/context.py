from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from semtag.core.config import CONFIG_FILENAME, Config, load_config
from semtag.core.errors import ErrorCode
from semtag.core.result import Err
from semtag.git.repository import Repository
from semtag.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    repository: Repository
    config: Config
    console: ConsoleProtocol


def build_context(
    repo_path: Path,
    config_path: Path | None = None,
    *,
    console_to_stderr: bool = False,
) -> CLIContext:
    """Locate the repository and load its config.

    An explicit ``config_path`` must exist; the default ``semtag.toml`` is
    optional.
    """
    console = RichConsole(stderr=console_to_stderr)

    try:
        root = repo_path.expanduser().resolve()
    except OSError as e:
        console.error(f"invalid --repo: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    repository = Repository(root)
    if not root.is_dir() or not repository.exists():
        console.error(f"'{root}' is not a git repository (missing .git)")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    path = config_path if config_path is not None else root / CONFIG_FILENAME
    config = Config()
    if config_path is not None or path.exists():
        result = load_config(path)
        if isinstance(result, Err):
            console.error(result.error.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = result.value

    return CLIContext(repository=repository, config=config, console=console)
