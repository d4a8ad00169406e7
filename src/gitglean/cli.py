"""gitglean CLI: Typer application with classify, status, progress, patch and init commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gitglean import __version__

app = typer.Typer(
    name="gitglean",
    help="Make sense of git's output: errors, status, progress and partial patches.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitglean.exceptions import GitError
    from gitglean.git.adapter import get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _optional_repo_root() -> Optional[Path]:
    """Repo root when inside a repository, else None."""
    from gitglean.exceptions import GitError
    from gitglean.git.adapter import get_repo_root

    try:
        return get_repo_root()
    except GitError:
        return None


def _load(ctx: typer.Context, repo_root: Optional[Path]):
    """Load config for *repo_root* (or cwd) and set up logging."""
    from gitglean.config.loader import load_config
    from gitglean.exceptions import ConfigError
    from gitglean.logging_config import configure_logging

    state = ctx.obj or {}
    try:
        cfg = load_config(repo_root or Path.cwd(), state.get("config"))
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if state.get("debug"):
        level = "DEBUG"
    elif state.get("verbose"):
        level = "INFO"
    else:
        level = cfg.logging.level
    configure_logging(level)
    return cfg


def _output_format(cfg, format: Optional[str]) -> str:
    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    return cfg.output.format


# ── classify ──────────────────────────────────────────────────────────────────


@app.command()
def classify(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="File holding git's output (default: stdin)"
    ),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """Classify a git failure message into a known error kind."""
    from gitglean.errors.classifier import explain
    from gitglean.errors.registry import build_registry
    from gitglean.output import json_report, terminal

    repo_root = _optional_repo_root()
    cfg = _load(ctx, repo_root)
    fmt = _output_format(cfg, format)

    text = file.read_text(encoding="utf-8", errors="replace") if file else sys.stdin.read()
    registry = build_registry(cfg, repo_root)
    result = explain(text, registry)

    if fmt == "json":
        print(json_report.render(result))
    else:
        terminal.render_classification(result, console)

    raise typer.Exit(code=0 if result is not None else 1)


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    ctx: typer.Context,
    input: Optional[Path] = typer.Option(
        None, "--input", "-i", exists=True, dir_okay=False,
        help="Decode a saved `git status --porcelain=2 -z` dump instead of running git",
    ),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """Show the working directory status, decoded from porcelain v2 output."""
    from gitglean.exceptions import GitError
    from gitglean.git.adapter import get_status
    from gitglean.output import json_report, terminal
    from gitglean.status.parser import parse_porcelain
    from gitglean.status.result import build_status_result

    if input is not None:
        cfg = _load(ctx, _optional_repo_root())
        fmt = _output_format(cfg, format)
        result = build_status_result(parse_porcelain(input.read_text(encoding="utf-8")))
    else:
        repo_root = _resolve_repo_root()
        cfg = _load(ctx, repo_root)
        fmt = _output_format(cfg, format)
        try:
            result = get_status(
                repo_root,
                max_buffer=cfg.git.max_status_buffer_size,
                timeout=cfg.git.timeout,
            )
        except GitError as exc:
            console.print(f"[bold red]Git error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
        if result is None:
            console.print("[bold red]Error:[/bold red] could not read repository status")
            raise typer.Exit(code=2)

    if fmt == "json":
        print(json_report.render(result))
    else:
        terminal.render_status(result, console)


# ── progress ──────────────────────────────────────────────────────────────────


@app.command()
def progress(
    ctx: typer.Context,
    operation: str = typer.Option(..., "--operation", "-o", help="clone | pull | checkout"),
    file: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="Captured stderr of the operation (default: stdin)"
    ),
    lfs: bool = typer.Option(False, "--lfs", help="Also decode Git LFS transfer lines"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """Replay captured git progress output as overall percentages."""
    from gitglean.output import json_report, terminal
    from gitglean.progress.combined import CombinedProgress
    from gitglean.progress.steps import parser_for

    cfg = _load(ctx, _optional_repo_root())
    fmt = _output_format(cfg, format)

    try:
        combined = CombinedProgress(parser_for(operation))
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    track_lfs = lfs or cfg.progress.track_lfs
    text = file.read_text(encoding="utf-8", errors="replace") if file else sys.stdin.read()

    # git rewrites progress lines in place with \r
    for line in text.splitlines():
        if not line.strip():
            continue
        event = combined.on_lfs_line(line) if track_lfs else None
        if event is None:
            event = combined.on_git_line(line)
        if event is None:
            continue
        if fmt == "json":
            print(json.dumps(json_report.progress_to_dict(event)))
        else:
            terminal.render_progress(event, console)


# ── patch ─────────────────────────────────────────────────────────────────────


def _repo_relative(path: str, repo_root: Path) -> str:
    try:
        return Path(path).resolve().relative_to(repo_root.resolve()).as_posix()
    except ValueError:
        return path


@app.command()
def patch(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to build the patch for"),
    lines: str = typer.Option(..., "--lines", "-l", help="Diff line indices to select, e.g. 3,5-7"),
    discard: bool = typer.Option(False, "--discard", help="Build a patch that discards the selected lines"),
    apply: bool = typer.Option(False, "--apply", help="Apply the patch (index for staging, working tree for discard)"),
) -> None:
    """Build a patch that stages (or discards) only the selected diff lines."""
    from gitglean.diff.selection import DiffSelection, parse_line_spec
    from gitglean.exceptions import GitError, NoChangesError
    from gitglean.git.adapter import apply_patch, get_status, get_working_directory_diff
    from gitglean.patch.formatter import format_patch, format_patch_to_discard_changes
    from gitglean.status.models import AppFileStatusKind

    repo_root = _resolve_repo_root()
    cfg = _load(ctx, repo_root)
    rel_path = _repo_relative(path, repo_root)

    try:
        indices = parse_line_spec(lines)
    except ValueError as exc:
        console.print(f"[bold red]Invalid line selection:[/bold red] {lines}")
        raise typer.Exit(code=2) from exc

    try:
        result = get_status(repo_root, max_buffer=cfg.git.max_status_buffer_size, timeout=cfg.git.timeout)
        file = result.working_directory.find_file(rel_path) if result else None
        if file is None:
            console.print(f"[yellow]No changes for {rel_path}.[/yellow]")
            raise typer.Exit(code=1)

        untracked = file.status.kind is AppFileStatusKind.UNTRACKED
        diff = get_working_directory_diff(repo_root, rel_path, untracked=untracked)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if diff.is_binary:
        console.print(f"[yellow]{rel_path} is binary; line selection does not apply.[/yellow]")
        raise typer.Exit(code=1)

    selection = DiffSelection.from_lines(indices).with_selectable_lines(diff.selectable_lines())

    if discard:
        text = format_patch_to_discard_changes(rel_path, diff, selection)
        if text is None:
            console.print(f"[yellow]Nothing to discard in {rel_path}.[/yellow]")
            raise typer.Exit(code=1)
    else:
        try:
            text = format_patch(file.with_selection(selection), diff)
        except NoChangesError as exc:
            console.print(f"[yellow]{exc}[/yellow]")
            raise typer.Exit(code=1) from exc

    print(text, end="")

    if apply:
        try:
            apply_patch(repo_root, text, cached=not discard)
        except GitError as exc:
            console.print(f"[bold red]Git error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
        target = "working tree" if discard else "index"
        console.print(f"[green]✓[/green] Applied to the {target}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitglean.toml in the repo root."""
    from gitglean.config.defaults import DEFAULT_TOML
    from gitglean.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitglean {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level"),
    debug: bool = typer.Option(False, "--debug", help="Log at DEBUG level, including every git call"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitglean.toml"),
) -> None:
    """gitglean: make sense of git's output."""
    ctx.obj = {"verbose": verbose, "debug": debug, "config": config}
