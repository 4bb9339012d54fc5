"""git-tree CLI — Typer application printing git status as a tree."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gittree import __version__

_EPILOG = (
    "git-tree searches for a git repository the same way git does, and "
    "displays a tree showing untracked and modified files. The tree's root "
    "is the repository's root. The tree's items are colored to indicate "
    "their status (green: new, red: modified, blue: ignored, yellow: "
    "unmerged). Changes to files in the index are shown in bold.\n\n"
    "A column in front of each file's name indicates changes to the index "
    "and the working tree, respectively (M: modified, N: new, D: deleted, "
    "R: renamed, C: copied, T: type changed, U: unmerged)."
)

app = typer.Typer(
    name="git-tree",
    help="tree + git status: displays git status info in a tree.",
    epilog=_EPILOG,
    add_completion=False,
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        print(f"git-tree {__version__}")
        raise typer.Exit()


@app.command()
def tree(
    path: Path = typer.Argument(Path("."), help="Repository or directory to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Include ignored files"),
    depth: int = typer.Option(
        0, "--depth", help="Recursively search for repositories up to DEPTH levels deep",
    ),
    summary: bool = typer.Option(
        False, "--summary", "-s",
        help="Show only a summary containing the number of additions, deletions, and changed files",
    ),
    collapse: bool = typer.Option(False, "--collapse", help="Collapse single-child directory chains"),
    sort: bool = typer.Option(True, "--sort/--no-sort", help="Sort entries by name instead of git's order"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Show untracked and modified files of a git working tree as a tree."""
    from gittree.git.adapter import GitError, NotARepositoryError
    from gittree.git.status_parser import StatusParseError
    from gittree.options import OptionsError, TreeOptions
    from gittree.tree.builder import PathError
    from gittree.tree.renderer import render_text
    from gittree.walker import run

    try:
        options = TreeOptions(
            all=all,
            depth=depth,
            summary=summary,
            collapse=collapse,
            sort=sort,
            color=not no_color,
        ).validate()
    except OptionsError as exc:
        console.print(f"[bold red]Invalid option:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Path: {path.resolve()}[/dim]")
        console.print(f"[dim]Options: {options}[/dim]")

    # --- Walk ---
    try:
        root = run(path, options)
    except NotARepositoryError as exc:
        console.print(f"[bold red]Error:[/bold red] no git repository found at {path}")
        if verbose:
            console.print(f"[dim]{exc}[/dim]")
        raise typer.Exit(code=1) from exc
    except StatusParseError as exc:
        console.print(f"[bold red]Unexpected git status output:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except PathError as exc:
        console.print(f"[bold red]Invalid path in git status:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        from gittree.tree.models import TreeNode

        if isinstance(root, TreeNode):
            count = sum(1 for _ in root.iter_entries())
            console.print(f"[dim]Entries: {count}[/dim]")

    # --- Output ---
    out = Console(highlight=False, color_system="auto" if options.color else None)
    out.print(render_text(root, collapse=options.collapse, sort=options.sort), soft_wrap=True)
