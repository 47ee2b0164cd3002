"""Low-level object commands: hash-object and cat-file."""

import click
from gog.core.repository import Repository, load_object
from gog.core.objects import OBJECT_KINDS
from gog.core.errors import GogError
from gog.cli.output import error


@click.command('hash-object')
@click.option('-t', '--type', 'kind', type=click.Choice(OBJECT_KINDS), default='blob',
              show_default=True, help='Type of object')
@click.option('-w', '--write', is_flag=True, help='Write the object into the object database')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def hash_object_cmd(kind, write, file):
    """
    Compute object ID and optionally create an object from a file.

    Without -w no repository is needed; the hash is only computed.

    Examples:
        gog hash-object hello.txt       # Print the blob hash
        gog hash-object -w hello.txt    # Store the blob as well
    """
    try:
        if write:
            repo = Repository.find_repository(file)
            sha = repo.hash_file(file, kind, write=True)
        else:
            sha = load_object(file, kind).hash
    except GogError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    click.echo(sha)


@click.command('cat-file')
@click.argument('kind', type=click.Choice(OBJECT_KINDS))
@click.argument('object_hash')
def cat_file_cmd(kind, object_hash):
    """
    Print the content of an object.

    KIND is the type the object is expected to have.

    Examples:
        gog cat-file blob ce013625030ba8dba906f756967f9e9ca394464a
    """
    try:
        repo = Repository.find_repository()
        obj = repo.read_object(object_hash, kind)
    except GogError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    click.echo(obj.serialize(), nl=False)
