"""Repository management for gog."""

import logging
import os
import tempfile
import zlib
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_CONFIG, Config
from .errors import (
    ConfigFileNotFound,
    KindMismatch,
    LengthMismatch,
    MalformedHeader,
    NotADirectory,
    ObjectNotFound,
    PathIsFile,
    RepositoryNotFound,
    WorkTreeNotEmpty,
)
from .fs import is_directory, is_empty_directory, is_regular_file
from .hash import frame_object, hash_object, is_object_address
from .objects import GitObject, object_class

logger = logging.getLogger(__name__)

GIT_DIR_NAME = '.git'
DEFAULT_DESCRIPTION = "Unnamed repository; edit this file 'description' to name the repository.\n"
DEFAULT_HEAD = 'ref: refs/heads/master\n'


class Repository:
    """
    Represents a git repository.

    A repository pairs a work tree with its ``.git`` directory and
    provides methods for reading and writing objects.
    """

    def __init__(self, path: Union[str, Path] = '.', force: bool = False):
        """
        Load a repository rooted at path.

        Args:
            path: Work tree root
            force: Skip the checks for ``.git`` and its config file, used
                while a repository is being created. An existing config
                file is still read.

        Raises:
            RepositoryNotFound: If path has no ``.git`` directory
            ConfigFileNotFound: If ``.git/config`` is missing
        """
        self.work_tree = Path(path).resolve()
        self.git_path = self.work_tree / GIT_DIR_NAME
        self.config: Config = DEFAULT_CONFIG

        if not force and not is_directory(self.git_path):
            raise RepositoryNotFound(self.work_tree)

        if is_regular_file(self.config_file):
            self.config = Config.load(self.config_file)
        elif not force:
            raise ConfigFileNotFound(self.config_file)

    @property
    def objects_dir(self) -> Path:
        return self.git_path / 'objects'

    @property
    def head_file(self) -> Path:
        return self.git_path / 'HEAD'

    @property
    def config_file(self) -> Path:
        return self.git_path / 'config'

    @classmethod
    def create(cls, path: Union[str, Path]) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .git directory structure::

            .git/
            ├── branches/
            ├── objects/       # Object database
            ├── refs/
            │   ├── heads/     # Branch references
            │   └── tags/      # Tag references
            ├── description
            ├── HEAD           # Points at refs/heads/master
            └── config         # Default [core] settings

        Args:
            path: Work tree; must not exist, or be an empty directory

        Returns:
            Repository: The new repository

        Raises:
            PathIsFile: If path exists and is not a directory
            WorkTreeNotEmpty: If path is a directory with entries
        """
        work_tree = Path(path)

        if work_tree.exists() and not is_directory(work_tree):
            raise PathIsFile(work_tree)
        if is_directory(work_tree):
            if not is_empty_directory(work_tree):
                raise WorkTreeNotEmpty(work_tree)
        else:
            work_tree.mkdir(parents=True)

        repo = cls(work_tree, force=True)

        repo.git_dir('branches', mkdir=True)
        repo.git_dir('objects', mkdir=True)
        repo.git_dir('refs', 'tags', mkdir=True)
        repo.git_dir('refs', 'heads', mkdir=True)

        repo.git_file('description').write_text(DEFAULT_DESCRIPTION)
        repo.git_file('HEAD').write_text(DEFAULT_HEAD)
        repo.git_file('config').write_text(repo.config.format())

        logger.debug("initialized empty repository in %s", repo.git_path)
        return repo

    @classmethod
    def find_repository(cls, path: Union[str, Path] = '.', required: bool = True) -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search
            required: Raise instead of returning None when nothing is found

        Returns:
            Repository if found, None if not found and not required

        Raises:
            RepositoryNotFound: If nothing is found and required is set
        """
        start = Path(path).resolve()
        current = start

        while True:
            if is_directory(current / GIT_DIR_NAME):
                logger.debug("found repository at %s", current)
                return cls(current)

            # Reached filesystem root
            if current == current.parent:
                break
            current = current.parent

        if required:
            raise RepositoryNotFound(start)
        return None

    def git_dir(self, *parts: str, mkdir: bool = False) -> Path:
        """
        Resolve a directory inside ``.git``.

        Args:
            parts: Path segments relative to ``.git``
            mkdir: Create the directory (and parents) if missing

        Returns:
            Path: The directory

        Raises:
            NotADirectory: If the path exists but is not a directory, or is
                missing and mkdir is not set
        """
        path = self.git_path.joinpath(*parts)

        if is_directory(path):
            return path
        if path.exists() or not mkdir:
            raise NotADirectory(path)

        try:
            path.mkdir(parents=True, exist_ok=True)
        except (FileExistsError, NotADirectoryError):
            raise NotADirectory(path) from None
        return path

    def git_file(self, *parts: str, mkdir: bool = False) -> Path:
        """
        Resolve a file inside ``.git``.

        The parent directory is resolved with :meth:`git_dir`, so it is
        created when mkdir is set.
        """
        if not parts:
            raise ValueError("file path not provided")
        return self.git_dir(*parts[:-1], mkdir=mkdir) / parts[-1]

    def object_path(self, sha: str, mkdir: bool = False) -> Path:
        """
        Get filesystem path for an object.

        Objects are stored in subdirectories named by the first 2 characters
        of the hash, with the remaining 38 characters as the filename.
        """
        return self.git_file('objects', sha[:2], sha[2:], mkdir=mkdir)

    def write_object(self, obj: GitObject, dry_run: bool = False) -> str:
        """
        Write object to repository.

        Objects are stored compressed with zlib. The format is:
        <type> <size>\\0<content>

        Args:
            obj: Object to write
            dry_run: Only compute the hash, leave storage untouched

        Returns:
            str: SHA-1 hash of the object
        """
        content = frame_object(obj.type, obj.serialize())
        sha = hash_object(content)

        if dry_run:
            return sha

        path = self.object_path(sha, mkdir=True)
        if path.exists():
            logger.debug("object %s already stored", sha)
            return sha

        # Write beside the final path and rename, so a partial object never
        # sits under its address.
        fd, tmp_name = tempfile.mkstemp(prefix='tmp_obj_', dir=path.parent)
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(zlib.compress(content))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("wrote %s %s", obj.type, sha)
        return sha

    def read_object(self, sha: str, kind: str) -> GitObject:
        """
        Read object from repository.

        The caller names the kind it expects; a stored object of another
        kind is an error rather than being returned as something else.

        Args:
            sha: 40-character SHA-1 hash
            kind: Expected object type

        Returns:
            GitObject: Deserialized object

        Raises:
            ObjectNotFound: If no object is stored under sha
            MalformedHeader: If the stored header cannot be decoded
            KindMismatch: If the stored object is not of the expected kind
            LengthMismatch: If the header size differs from the payload size
            UnsupportedKind: If kind has no implementation
        """
        if not is_object_address(sha):
            raise ObjectNotFound(sha)
        try:
            path = self.object_path(sha)
        except NotADirectory:
            raise ObjectNotFound(sha) from None
        if not is_regular_file(path):
            raise ObjectNotFound(sha)

        try:
            raw = zlib.decompress(path.read_bytes())
        except zlib.error as e:
            raise MalformedHeader(sha, f"cannot decompress: {e}") from e

        # Header: <type> <size>\0
        null_idx = raw.find(b'\0')
        space_idx = raw.find(b' ', 0, null_idx if null_idx >= 0 else len(raw))
        if space_idx < 0:
            raise MalformedHeader(sha, "missing space after type")

        actual = raw[:space_idx].decode('ascii', 'replace')
        if actual != kind:
            raise KindMismatch(sha, kind, actual)

        if null_idx < 0:
            raise MalformedHeader(sha, "missing null byte after size")
        size_field = raw[space_idx + 1:null_idx]
        if not size_field.isdigit():
            raise MalformedHeader(sha, f"invalid size {size_field!r}")

        size = int(size_field)
        data = raw[null_idx + 1:]
        if len(data) != size:
            raise LengthMismatch(sha, size, len(data))

        obj = object_class(kind)()
        obj.deserialize(data)
        logger.debug("read %s %s", kind, sha)
        return obj

    def hash_file(self, filepath: Union[str, Path], kind: str = 'blob', write: bool = True) -> str:
        """
        Hash a file's content as an object of the given kind.

        Args:
            filepath: File to read
            kind: Object type to wrap the content in
            write: Store the object, not just compute its hash

        Returns:
            str: SHA-1 hash of the object
        """
        return self.write_object(load_object(filepath, kind), dry_run=not write)

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"


def load_object(filepath: Union[str, Path], kind: str = 'blob') -> GitObject:
    """
    Build an object of the given kind from a file's bytes.

    Raises:
        UnsupportedKind: If kind has no implementation
    """
    obj = object_class(kind)()
    with open(filepath, 'rb') as f:
        obj.deserialize(f.read())
    return obj
