"""Destination inspection: decides whether a directory is safe to scaffold into."""

import os
import stat
from dataclasses import dataclass

import click

SAFE_ENTRIES = frozenset((
    ".DS_Store",
    ".git",
    ".gitattributes",
    ".gitignore",
    ".gitlab-ci.yml",
    ".hg",
    ".hgcheck",
    ".hgignore",
    ".idea",
    ".npmignore",
    ".travis.yml",
    ".yarn",
    "LICENSE",
    "README.md",
    "Thumbs.db",
    "docs",
    "mkdocs.yml",
    "npm-debug.log",
    "yarn-debug.log",
    "yarn-error.log",
    "yarnrc.yml",
))

# IntelliJ-based editors
SAFE_SUFFIXES = (".iml",)


@dataclass(frozen=True)
class Conflict:
    name: str
    is_directory: bool


def _is_safe_entry(name):
    return name in SAFE_ENTRIES or name.endswith(SAFE_SUFFIXES)


def _classify(root, name):
    try:
        return stat.S_ISDIR(os.lstat(os.path.join(root, name)).st_mode)
    except OSError:
        return False


def find_conflicts(root: str) -> list[Conflict]:
    """List entries of root that are not known-safe artifacts, in listing order.

    Entries that cannot be inspected are reported as files.
    """
    return [
        Conflict(name=entry, is_directory=_classify(root, entry))
        for entry in os.listdir(root)
        if not _is_safe_entry(entry)
    ]


def print_conflicts(display_name, conflicts):
    click.echo(
        f"The directory {click.style(display_name, fg='green')} "
        "contains files that could conflict:"
    )
    click.echo()
    for conflict in conflicts:
        if conflict.is_directory:
            click.echo(f"  {click.style(conflict.name, fg='blue')}/")
        else:
            click.echo(f"  {conflict.name}")
    click.echo()
    click.echo("Either try using a new directory name, or remove the files listed above.")
    click.echo()


def is_safe_to_scaffold(root: str, display_name: str) -> bool:
    """Return True when root is missing or holds only known-safe artifacts.

    Prints a conflict report, or a note that root is not a directory, before
    returning False. Never modifies root.
    """
    if not os.path.exists(root):
        return True
    if not os.path.isdir(root):
        click.echo(
            f"The path {click.style(display_name, fg='green')} already exists and is not a directory.",
            err=True,
        )
        click.echo("Either try using a new directory name, or remove the file.", err=True)
        return False
    conflicts = find_conflicts(root)
    if conflicts:
        print_conflicts(display_name, conflicts)
        return False
    return True
