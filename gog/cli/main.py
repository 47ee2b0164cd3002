"""Main CLI entry point for gog."""

import logging

import click
from colorama import init

from gog import __version__
from gog.cli.commands import init_cmd, hash_object_cmd, cat_file_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


@click.group()
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log object store activity')
def cli(verbose):
    """gog is a git subset written in Python."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')


cli.add_command(init_cmd)
cli.add_command(hash_object_cmd)
cli.add_command(cat_file_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
