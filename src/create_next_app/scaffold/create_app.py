"""Project creation: fetch an example or render the default template into the app path."""

import os
import shutil
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import click
from git import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

from create_next_app.resolver import ProjectConfig
from create_next_app.scaffold.default_template import install_default_template
from create_next_app.scaffold.example_source import (
    DownloadError,
    InvalidExampleError,
    download_example,
    resolve_example,
)

INITIAL_COMMIT_MESSAGE = "Initial commit from Create Next App"


class ScaffoldStatus(Enum):
    CREATED = "created"
    DOWNLOAD_FAILED = "download_failed"


@dataclass(frozen=True)
class ScaffoldOptions:
    """Everything create_app needs for one project."""

    app_path: str
    package_manager: str
    config: ProjectConfig
    example: Optional[str] = None
    example_path: Optional[str] = None

    def without_example(self):
        return ScaffoldOptions(
            app_path=self.app_path,
            package_manager=self.package_manager,
            config=self.config,
        )


@dataclass(frozen=True)
class ScaffoldResult:
    status: ScaffoldStatus
    error: Optional[DownloadError] = None

    @property
    def download_failed(self):
        return self.status is ScaffoldStatus.DOWNLOAD_FAILED


def try_git_init(root):
    """Initialise a repository with one commit unless root is already inside one.

    Returns True if a repository was created.
    """
    try:
        Repo(root, search_parent_directories=True)
        return False
    except (InvalidGitRepositoryError, NoSuchPathError):
        pass
    try:
        repo = Repo.init(root)
        repo.git.checkout("-b", "main")
        repo.git.add("-A")
        repo.index.commit(INITIAL_COMMIT_MESSAGE)
        return True
    except (GitCommandError, GitCommandNotFound):
        shutil.rmtree(os.path.join(root, ".git"), ignore_errors=True)
        return False


def _is_writeable(path):
    """Check write access on the closest ancestor of path that exists."""
    parent = os.path.dirname(path)
    while not os.path.exists(parent) and os.path.dirname(parent) != parent:
        parent = os.path.dirname(parent)
    return os.access(parent, os.W_OK)


def _run_command(package_manager, script):
    if package_manager == "yarn":
        return f"yarn {script}"
    return f"{package_manager} run {script}"


def print_next_steps(app_name, root, package_manager):
    cd_path = os.path.relpath(root)
    if cd_path.startswith(".."):
        cd_path = root
    click.echo(f"{click.style('Success!', fg='green')} Created {app_name} at {root}")
    click.echo("Inside that directory, you can run several commands:")
    click.echo()
    click.echo(click.style(f"  {package_manager} install", fg="cyan"))
    click.echo("    Installs the dependencies.")
    click.echo()
    click.echo(click.style(f"  {_run_command(package_manager, 'dev')}", fg="cyan"))
    click.echo("    Starts the development server.")
    click.echo()
    click.echo(click.style(f"  {_run_command(package_manager, 'build')}", fg="cyan"))
    click.echo("    Builds the app for production.")
    click.echo()
    click.echo("We suggest that you begin by typing:")
    click.echo()
    click.echo(f"  {click.style('cd', fg='cyan')} {cd_path}")
    click.echo(f"  {click.style(_run_command(package_manager, 'dev'), fg='cyan')}")
    click.echo()


class ProjectCreator:
    """Creates the project on disk using injectable download and git steps.

    Args:
        download_fn: Callable(repo_info, root) fetching an example.
        git_init_fn: Callable(root) initialising version control.
    """

    def __init__(self, download_fn=None, git_init_fn=None):
        self._download_fn = download_fn or download_example
        self._git_init_fn = git_init_fn or try_git_init

    def create_app(self, options: ScaffoldOptions) -> ScaffoldResult:
        """Create the project described by options.

        Download failures come back as a DOWNLOAD_FAILED result so the caller
        can offer the default template. Every other error propagates.
        """
        root = os.path.abspath(options.app_path)
        app_name = os.path.basename(root)

        if not _is_writeable(root):
            click.echo(
                "The application path is not writable, please check folder "
                "permissions and try again.",
                err=True,
            )
            click.echo(
                "It is likely you do not have write permissions for this folder.",
                err=True,
            )
            sys.exit(1)

        os.makedirs(root, exist_ok=True)

        if options.example:
            try:
                repo_info = resolve_example(options.example, options.example_path)
            except InvalidExampleError as exc:
                click.echo(click.style(str(exc), fg="red"), err=True)
                sys.exit(1)
            click.echo(f"Creating a new Next.js app in {click.style(root, fg='green')}.")
            click.echo()
            click.echo(
                f"Downloading files from repo {click.style(options.example, fg='cyan')}. "
                "This might take a moment."
            )
            click.echo()
            try:
                self._download_fn(repo_info, root)
            except DownloadError as exc:
                return ScaffoldResult(ScaffoldStatus.DOWNLOAD_FAILED, error=exc)
            except InvalidExampleError as exc:
                click.echo(click.style(str(exc), fg="red"), err=True)
                sys.exit(1)
        else:
            click.echo(f"Creating a new Next.js app in {click.style(root, fg='green')}.")
            click.echo()
            install_default_template(root, app_name, options.config)

        if self._git_init_fn(root):
            click.echo("Initialized a git repository.")
            click.echo()

        print_next_steps(app_name, root, options.package_manager)
        return ScaffoldResult(ScaffoldStatus.CREATED)
