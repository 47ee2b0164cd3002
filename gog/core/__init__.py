"""Core functionality for gog.

This module contains the object store:
- Objects (Blob, Commit) and the KVLM codec commits are stored in
- Repository discovery, creation and object reads/writes
- Repository configuration
- Hashing utilities and typed errors

For the command line, see gog.cli
"""

from gog.core.objects import GitObject, Blob, Commit, object_class
from gog.core.kvlm import KVLM, parse_kvlm, serialize_kvlm
from gog.core.repository import Repository, load_object
from gog.core.hash import hash_object, frame_object
from gog.core.config import Config, DEFAULT_CONFIG
from gog.core.errors import GogError

__all__ = [
    'GitObject',
    'Blob',
    'Commit',
    'object_class',
    'KVLM',
    'parse_kvlm',
    'serialize_kvlm',
    'Repository',
    'load_object',
    'Config',
    'DEFAULT_CONFIG',
    'GogError',
    'hash_object',
    'frame_object',
]
