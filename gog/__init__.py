"""gog - a subset of git's object store implemented in Python."""

__version__ = '0.1.0'

from gog.core.repository import Repository
from gog.core.objects import GitObject, Blob, Commit

__all__ = [
    'Repository',
    'GitObject',
    'Blob',
    'Commit',
]
