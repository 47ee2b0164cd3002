"""Git objects for gog."""

import time
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from .errors import UnsupportedKind
from .hash import frame_object, hash_object
from .kvlm import KVLM, parse_kvlm, serialize_kvlm

OBJECT_KINDS = ('blob', 'commit', 'tree', 'tag')


class GitObject(ABC):
    """Base class for all stored objects."""

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Object payload, without header
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Replace object state with a decoded payload.

        Args:
            data: Object payload, without header
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute the object address.

        The hash covers the header and payload, never the compressed bytes.
        Format: <type> <size>\\0<content>

        Returns:
            str: 40-character SHA-1 hash
        """
        return hash_object(frame_object(self.type, self.serialize()))

    @property
    def hash(self) -> str:
        """40-character SHA-1 address of the object."""
        return self.compute_hash()

    def __eq__(self, other) -> bool:
        if not isinstance(other, GitObject):
            return NotImplemented
        return self.type == other.type and self.serialize() == other.serialize()


class Blob(GitObject):
    """
    Represents file content.

    A blob stores raw bytes without any metadata like filename or
    permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """Create blob from the content of a file."""
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Commit(GitObject):
    """
    Represents a commit.

    The payload is a KVLM: ``tree``, ``parent`` (zero or more), ``author``
    and ``committer`` headers followed by the message. Headers are kept in
    the order they were read so the commit reserializes byte for byte.
    """

    def __init__(self, kvlm: Optional[KVLM] = None):
        self.kvlm = kvlm if kvlm is not None else KVLM()

    def serialize(self) -> bytes:
        return serialize_kvlm(self.kvlm)

    def deserialize(self, data: bytes) -> None:
        self.kvlm = parse_kvlm(data)

    @property
    def tree(self) -> str:
        return self.kvlm.first('tree', '')

    @property
    def parents(self) -> List[str]:
        return self.kvlm.get('parent')

    @property
    def author(self) -> str:
        return self.kvlm.first('author', '')

    @property
    def committer(self) -> str:
        return self.kvlm.first('committer', '')

    @property
    def message(self) -> str:
        return self.kvlm.message

    @classmethod
    def create(
        cls,
        tree_hash: str,
        parent_hashes: List[str],
        author: str,
        committer: str,
        message: str,
        timestamp: Optional[int] = None,
        timezone: str = '+0000'
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            tree_hash: Hash of tree object
            parent_hashes: List of parent commit hashes
            author: Author name and email (e.g., "Name <email>")
            committer: Committer name and email
            message: Commit message
            timestamp: Unix timestamp (defaults to current time)
            timezone: Timezone offset (e.g., "+0000", "-0500")

        Returns:
            Commit: New commit object
        """
        if timestamp is None:
            timestamp = int(time.time())

        kvlm = KVLM(message=message)
        kvlm.add('tree', tree_hash)
        for parent in parent_hashes:
            kvlm.add('parent', parent)
        kvlm.add('author', f'{author} {timestamp} {timezone}')
        kvlm.add('committer', f'{committer} {timestamp} {timezone}')
        return cls(kvlm)

    def __repr__(self) -> str:
        parent_info = f", parents={len(self.parents)}" if self.parents else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"


_OBJECT_CLASSES: Dict[str, Type[GitObject]] = {
    'blob': Blob,
    'commit': Commit,
}


def object_class(kind: str) -> Type[GitObject]:
    """
    Look up the class implementing an object kind.

    Args:
        kind: Object type name

    Returns:
        The GitObject subclass for kind

    Raises:
        UnsupportedKind: For tree and tag, which are not implemented,
            and for names that are not object kinds at all
    """
    try:
        return _OBJECT_CLASSES[kind]
    except KeyError:
        raise UnsupportedKind(kind) from None
