"""Click command for create-next-app."""

import signal
import sys

import click

from create_next_app.flags import EXAMPLE_WITHOUT_VALUE, Flags
from create_next_app.runner import run


def _handle_sigterm(_signum, _frame):
    sys.exit(0)


def _empty_as_unset(_ctx, _param, value):
    return value or None


def report_failure(reason):
    """Print the abort banner for an error nobody handled."""
    click.echo()
    click.echo("Aborting installation.")
    command = getattr(reason, "command", None)
    if command:
        click.echo(f"  {click.style(str(command), fg='cyan')} has failed.")
    else:
        click.echo(click.style("Unexpected error. Please report it as a bug:", fg="red"))
        click.echo(f"  {type(reason).__name__}: {reason}")
    click.echo()


@click.command("create-next-app")
@click.version_option(package_name="create-next-app")
@click.argument("project_directory", required=False)
@click.option("--ts", "--typescript", "typescript_flag", is_flag=True,
              help="Initialize as a TypeScript project. (default)")
@click.option("--js", "--javascript", "javascript_flag", is_flag=True,
              help="Initialize as a JavaScript project.")
@click.option("--tailwind/--no-tailwind", default=None,
              help="Initialize with Tailwind CSS config. (default)")
@click.option("--eslint/--no-eslint", default=None,
              help="Initialize with eslint config.")
@click.option("--app/--no-app", default=None,
              help="Initialize as an App Router project.")
@click.option("--src-dir/--no-src-dir", default=None,
              help="Initialize inside a `src/` directory.")
@click.option("--import-alias", metavar="<alias-to-configure>", callback=_empty_as_unset,
              help='Specify import alias to use (default "@/*").')
@click.option("--use-npm", "package_manager", flag_value="npm",
              help="Explicitly tell the CLI to bootstrap the application using npm.")
@click.option("--use-pnpm", "package_manager", flag_value="pnpm",
              help="Explicitly tell the CLI to bootstrap the application using pnpm.")
@click.option("--use-yarn", "package_manager", flag_value="yarn",
              help="Explicitly tell the CLI to bootstrap the application using Yarn.")
@click.option("--use-bun", "package_manager", flag_value="bun",
              help="Explicitly tell the CLI to bootstrap the application using Bun.")
@click.option("-e", "--example", is_flag=False, flag_value=EXAMPLE_WITHOUT_VALUE, default=None,
              metavar="[name]|[github-url]",
              help="An example to bootstrap the app with: an example name from the "
                   "official Next.js repo or a GitHub URL, with any branch and/or subdirectory.")
@click.option("--example-path", metavar="<path-to-example>",
              help="Path to the example inside the repository, needed when the branch "
                   "name in the GitHub URL contains a slash (e.g. bug/fix-1).")
@click.option("--reset-preferences", is_flag=True,
              help="Explicitly tell the CLI to reset any stored preferences.")
def main(project_directory, typescript_flag, javascript_flag, **options):
    """Create a Next.js app in PROJECT_DIRECTORY."""
    signal.signal(signal.SIGTERM, _handle_sigterm)
    flags = Flags.from_options(
        project_directory=project_directory,
        typescript_flag=typescript_flag,
        javascript_flag=javascript_flag,
        **options,
    )
    try:
        run(flags)
    except (click.ClickException, click.Abort):
        raise
    except Exception as reason:
        report_failure(reason)
        sys.exit(1)
