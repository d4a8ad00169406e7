"""Rich terminal reporter: status table, classification panel, progress lines."""

from __future__ import annotations

from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gitglean.errors.models import Classification
from gitglean.progress.models import GitParsingResult, GitProgress
from gitglean.status.models import (
    AppFileStatus,
    AppFileStatusKind,
    ConflictsWithMarkers,
    CopiedOrRenamedFileStatus,
    ManualConflict,
    StatusEntry,
    StatusResult,
)

_STATUS_STYLE = {
    AppFileStatusKind.NEW: "green",
    AppFileStatusKind.UNTRACKED: "green",
    AppFileStatusKind.MODIFIED: "yellow",
    AppFileStatusKind.DELETED: "red",
    AppFileStatusKind.RENAMED: "cyan",
    AppFileStatusKind.COPIED: "cyan",
    AppFileStatusKind.CONFLICTED: "bold white on red",
}


def _details(status: AppFileStatus) -> str:
    parts = []
    if isinstance(status, CopiedOrRenamedFileStatus):
        parts.append(f"from {status.old_path}")
    elif isinstance(status, ConflictsWithMarkers):
        parts.append(f"{status.entry.details.action.value}, {status.conflict_marker_count} markers")
    elif isinstance(status, ManualConflict):
        parts.append(status.entry.details.action.value)

    sub = status.submodule_status
    if sub is not None:
        flags = [
            name
            for name, on in (
                ("commit", sub.commit_changed),
                ("modified", sub.modified_changes),
                ("untracked", sub.untracked_changes),
            )
            if on
        ]
        parts.append("submodule" + (f" ({', '.join(flags)})" if flags else ""))
    return "; ".join(parts)


def _branch_line(result: StatusResult) -> str:
    branch = result.current_branch or "(detached)"
    line = f"[bold]On branch[/bold] [cyan]{branch}[/cyan]"
    if result.current_upstream_branch:
        line += f" [dim]tracking[/dim] {result.current_upstream_branch}"
    ab = result.branch_ahead_behind
    if ab is not None:
        line += f" [dim](ahead {ab.ahead}, behind {ab.behind})[/dim]"
    return line


def render_status(result: StatusResult, console: Optional[Console] = None) -> None:
    """Print a decoded status as a table."""
    console = console or Console(stderr=True)
    console.print()
    console.print(_branch_line(result))

    files = result.working_directory.files
    if not files:
        console.print("[bold green]Working tree clean.[/bold green]")
        return

    codes: Dict[str, StatusEntry] = {e.path: e for e in result.entries}

    table = Table(
        title="Working Directory",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Path", style="magenta")
    table.add_column("Status", justify="center", width=12)
    table.add_column("Index", justify="center")
    table.add_column("Working tree", justify="center")
    table.add_column("Details")

    for file in files:
        entry = codes.get(file.path)
        code = entry.status_code if entry is not None else "  "
        kind = file.status.kind
        table.add_row(
            file.path,
            Text(kind.value, style=_STATUS_STYLE.get(kind, "")),
            code[:1],
            code[1:2],
            _details(file.status),
        )

    console.print(table)

    if result.do_conflicted_files_exist:
        console.print("[bold red]Unresolved conflicts in the index.[/bold red]")
    elif result.merge_head_found:
        console.print("[bold yellow]Merge in progress.[/bold yellow]")


def render_classification(
    classification: Optional[Classification], console: Optional[Console] = None
) -> None:
    """Print the classified kind and its description in a panel."""
    console = console or Console(stderr=True)
    if classification is None:
        console.print("[yellow]Unrecognised git error.[/yellow]")
        return

    body = Text(classification.description or "No description available.")
    if classification.oversized_files:
        body.append("\n\nFiles over the limit:\n", style="bold")
        body.append("\n".join(f"  {name}" for name in classification.oversized_files))

    console.print(
        Panel(
            body,
            title=f"[bold red]{classification.kind.name}[/bold red]",
            subtitle=classification.kind.value,
            border_style="red",
        )
    )


def render_progress(event: GitParsingResult, console: Optional[Console] = None) -> None:
    """One line per progress event."""
    console = console or Console(stderr=True)
    if isinstance(event, GitProgress):
        line = Text(f"{event.percent:>3}% ", style="green")
        line.append(event.details.title)
        if event.details.text and event.details.text != event.details.title:
            line.append(f"  {event.details.text}", style="dim")
    else:
        line = Text(f"{event.percent:>3}% {event.text}", style="dim")
    console.print(line)
