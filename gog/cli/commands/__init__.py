"""CLI commands for gog."""

from gog.cli.commands.init import init_cmd
from gog.cli.commands.objects import hash_object_cmd, cat_file_cmd

__all__ = ['init_cmd', 'hash_object_cmd', 'cat_file_cmd']
