"""Initialize a new gog repository."""

import click
from gog.core.repository import Repository
from gog.core.errors import GogError
from gog.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new repository.

    PATH must not exist yet, or be an empty directory.

    Examples:
        gog init                    # Initialize in current directory
        gog init my-project         # Initialize in my-project directory
    """
    try:
        repo = Repository.create(path)
    except GogError as e:
        click.echo(error(str(e)), err=True)
        click.echo(info("Use an empty directory or a new path"), err=True)
        raise click.Abort()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"), err=True)
        raise click.Abort()

    click.echo(success(f"Initialized empty Git repository in {repo.git_path}"))
