"""One create-next-app run: validate, resolve, scaffold, remember preferences."""

import os
import sys
from dataclasses import dataclass

import click

from create_next_app.destination import is_safe_to_scaffold
from create_next_app.environment import detect_package_manager, is_ci
from create_next_app.flags import Flags, is_valid_import_alias
from create_next_app.name_validator import validate_name
from create_next_app.preferences import PreferenceStore
from create_next_app.prompter import ClickPrompter
from create_next_app.resolver import INTERACTIVE, NON_INTERACTIVE, ConfigurationResolver
from create_next_app.scaffold.create_app import ProjectCreator, ScaffoldOptions

PROGRAM_NAME = "create-next-app"
DEFAULT_PROJECT_NAME = "my-app"


@dataclass
class RunDeps:
    """Injectable collaborators for a run."""

    store: PreferenceStore = None
    prompter: object = None
    creator: ProjectCreator = None
    ci: bool = None

    def __post_init__(self):
        if self.store is None:
            self.store = PreferenceStore()
        if self.prompter is None:
            self.prompter = ClickPrompter()
        if self.creator is None:
            self.creator = ProjectCreator()
        if self.ci is None:
            self.ci = is_ci()

    @property
    def mode(self):
        return NON_INTERACTIVE if self.ci else INTERACTIVE


def _project_name_problem(value):
    validation = validate_name(os.path.basename(os.path.abspath(value)))
    if validation.valid:
        return None
    return f"Invalid project name: {validation.problems[0]}"


def _print_missing_directory_hint():
    program = click.style(PROGRAM_NAME, fg="cyan")
    example = click.style("my-next-app", fg="green")
    click.echo()
    click.echo("Please specify the project directory:")
    click.echo(f"  {program} {click.style('<project-directory>', fg='green')}")
    click.echo("For example:")
    click.echo(f"  {program} {example}")
    click.echo()
    click.echo(f"Run {click.style(f'{PROGRAM_NAME} --help', fg='cyan')} to see all options.")


def _print_name_problems(project_name, problems):
    quoted = click.style(f'"{project_name}"', fg="red")
    click.echo(
        f"Could not create a project called {quoted} because of npm naming restrictions:",
        err=True,
    )
    for problem in problems:
        click.echo(f"    {click.style('*', fg='red', bold=True)} {problem}", err=True)


def _project_path(flags, deps):
    project_path = (flags.project_directory or "").strip()
    if not project_path and deps.mode == INTERACTIVE:
        answer = deps.prompter.ask_text(
            "path", "What is your project named?", DEFAULT_PROJECT_NAME,
            validate=_project_name_problem,
        )
        project_path = (answer or "").strip()
    return project_path


def _offer_default_template(example, result, deps):
    """Ask whether to fall back to the default template. Re-raises on refusal."""
    if deps.mode != INTERACTIVE:
        raise result.error
    use_builtin = deps.prompter.ask_toggle(
        "builtin",
        f'Could not download "{example}" because of a connectivity issue between '
        "your machine and GitHub.\nDo you want to use the default template instead?",
        True,
    )
    if not use_builtin:
        raise result.error


def run(flags: Flags, deps: RunDeps = None):
    """Create one project as described by flags.

    Exits with status 1 on a missing or invalid project name, a bare
    --example, a malformed import alias, or an unsafe destination. Stored preferences are only
    rewritten after the project has been created.
    """
    if deps is None:
        deps = RunDeps()

    if flags.reset_preferences:
        deps.store.clear()
        click.echo("Preferences reset successfully")
        return

    project_path = _project_path(flags, deps)
    if not project_path:
        _print_missing_directory_hint()
        sys.exit(1)

    resolved_project_path = os.path.abspath(project_path)
    project_name = os.path.basename(resolved_project_path)

    validation = validate_name(project_name)
    if not validation.valid:
        _print_name_problems(project_name, validation.problems)
        sys.exit(1)

    if flags.example is True:
        click.echo(
            "Please provide an example name or url, otherwise remove the example option.",
            err=True,
        )
        sys.exit(1)

    if flags.import_alias is not None and not is_valid_import_alias(flags.import_alias):
        click.echo(
            f"Invalid import alias {click.style(flags.import_alias, fg='red')}: "
            "it must follow the pattern <prefix>/*",
            err=True,
        )
        sys.exit(1)

    if not is_safe_to_scaffold(resolved_project_path, project_name):
        sys.exit(1)

    resolver = ConfigurationResolver(
        deps.mode, deps.prompter if deps.mode == INTERACTIVE else None,
    )
    config, preferences = resolver.resolve(flags, deps.store.load())

    example = flags.example_name
    options = ScaffoldOptions(
        app_path=resolved_project_path,
        package_manager=flags.package_manager or detect_package_manager(),
        config=config,
        example=example if example and example != "default" else None,
        example_path=flags.example_path,
    )

    result = deps.creator.create_app(options)
    if result.download_failed:
        _offer_default_template(example, result, deps)
        deps.creator.create_app(options.without_example())

    deps.store.save(preferences)
