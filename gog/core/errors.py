"""Exceptions raised by the gog object store."""

from typing import Optional


class GogError(Exception):
    """Base class for all gog errors."""


class RepositoryNotFound(GogError):
    """No .git directory was found."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"not a git repository: {path}")


class PathIsFile(GogError):
    """The work tree path exists but is not a directory."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"work tree already exists as a file: {path}")


class WorkTreeNotEmpty(GogError):
    """The work tree directory already has entries."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"work tree is not empty: {path}")


class NotADirectory(GogError):
    """A path inside .git is missing or is not a directory."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"not a directory: {path}")


class ConfigFileNotFound(GogError):
    """The repository has no config file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"config file not found: {path}")


class ObjectNotFound(GogError):
    """No object is stored under the given address."""

    def __init__(self, sha: str):
        self.sha = sha
        super().__init__(f"object not found: {sha}")


class MalformedHeader(GogError):
    """The stored object header cannot be decoded."""

    def __init__(self, sha: str, reason: str):
        self.sha = sha
        self.reason = reason
        super().__init__(f"malformed object {sha}: {reason}")


class KindMismatch(GogError):
    """The stored object has a different kind than requested."""

    def __init__(self, sha: str, expected: str, actual: str):
        self.sha = sha
        self.expected = expected
        self.actual = actual
        super().__init__(f"object {sha} is a {actual}, not a {expected}")


class LengthMismatch(GogError):
    """The header length does not match the payload size."""

    def __init__(self, sha: str, expected: int, actual: int):
        self.sha = sha
        self.expected = expected
        self.actual = actual
        super().__init__(f"object {sha} size mismatch: header says {expected}, payload is {actual}")


class UnsupportedKind(GogError):
    """The object kind is known but not implemented, or unknown."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"unsupported object type: {kind}")


class MalformedKVLM(GogError):
    """Commit-style key/value text could not be parsed."""

    def __init__(self, position: int, reason: Optional[str] = None):
        self.position = position
        self.reason = reason or "unexpected end of input"
        super().__init__(f"invalid kvlm at offset {position}: {self.reason}")
