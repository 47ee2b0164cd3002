"""Repository configuration for gog.

Only three settings of git's config dialect are understood:
``core.repositoryformatversion``, ``core.filemode`` and ``core.bare``.
Everything else in a config file is skipped without complaint.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)

_TRUE_VALUES = {'true', 't', 'yes', 'on', '1'}
_FALSE_VALUES = {'false', 'f', 'no', 'off', '0'}


def _parse_bool(value: str) -> Optional[bool]:
    value = value.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def _parse_version(value: str) -> Optional[int]:
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


@dataclass(frozen=True)
class Config:
    """
    Settings read from a repository's ``.git/config``.

    Instances are immutable; parsing always builds a new value starting
    from the defaults.
    """

    repository_format_version: int = 0
    filemode: bool = True
    bare: bool = False

    @classmethod
    def parse(cls, lines: Iterable[str]) -> 'Config':
        """
        Parse config text.

        Lines are matched on their key only, so section headers and
        unrelated keys (``url``, ``fetch``, ...) are ignored. A recognized
        key with a value of the wrong type is ignored as well.

        Args:
            lines: Any iterable of text lines, e.g. an open file

        Returns:
            Config: Defaults overridden by the recognized settings
        """
        version = DEFAULT_CONFIG.repository_format_version
        filemode = DEFAULT_CONFIG.filemode
        bare = DEFAULT_CONFIG.bare

        for line in lines:
            parts = line.strip().split('=')
            if len(parts) != 2:
                continue
            key = parts[0].strip().lower()
            value = parts[1].strip()

            if key == 'repositoryformatversion':
                parsed = _parse_version(value)
                if parsed is not None:
                    version = parsed
            elif key == 'filemode':
                parsed = _parse_bool(value)
                if parsed is not None:
                    filemode = parsed
            elif key == 'bare':
                parsed = _parse_bool(value)
                if parsed is not None:
                    bare = parsed

        return cls(repository_format_version=version, filemode=filemode, bare=bare)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'Config':
        """Read and parse a config file."""
        logger.debug("reading config %s", path)
        # Unknown sections may hold any encoding; their lines are skipped anyway.
        with open(path, 'r', encoding='utf-8', errors='surrogateescape') as f:
            return cls.parse(f)

    def format(self) -> str:
        """Render the ``[core]`` block written by ``gog init``."""
        return (
            "[core]\n"
            f"\trepositoryformatversion = {self.repository_format_version}\n"
            f"\tfilemode = {str(self.filemode).lower()}\n"
            f"\tbare = {str(self.bare).lower()}\n"
        )


DEFAULT_CONFIG = Config()
