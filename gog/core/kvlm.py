"""Key-value list with message (KVLM) codec.

Commits (and, in git, tags) are stored as a list of header lines followed
by a blank line and a free-text message::

    tree 29ff16c9c14e2652b22f8b78bb08a5a07930c147
    parent 206941306e8a8af65b66eaaaea388a7ae24d49a0
    gpgsig -----BEGIN PGP SIGNATURE-----
     iQIzBAABCAAdFiEExwXquOM8bWb4Q3RFJQWTMzJSMUMFAmVQ==
     -----END PGP SIGNATURE-----

    Commit message

A header value spanning several lines is folded: every embedded newline is
followed by a single space.
"""

from typing import Iterator, List, Optional, Tuple

from .errors import MalformedKVLM

# Lets arbitrary bytes survive a decode/encode round trip.
_ENCODING = 'utf-8'
_ERRORS = 'surrogateescape'


class KVLM:
    """
    Ordered header entries plus a message.

    Keys may repeat (a merge commit has several ``parent`` lines) and the
    order in which entries were added is kept, so serializing a parsed
    KVLM reproduces the original text.
    """

    def __init__(self, entries: Optional[List[Tuple[str, str]]] = None, message: str = ''):
        self._entries: List[Tuple[str, str]] = list(entries or [])
        self.message = message

    def add(self, key: str, value: str) -> None:
        """
        Append a header entry.

        The empty key names the message; adding to it replaces the
        message instead of adding a header.
        """
        if key == '':
            self.message = value
        else:
            self._entries.append((key, value))

    def get(self, key: str) -> List[str]:
        """Return every value stored under key, in order."""
        if key == '':
            return [self.message]
        return [v for k, v in self._entries if k == key]

    def first(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the first value for key, or default."""
        values = self.get(key)
        return values[0] if values else default

    def set(self, key: str, values: List[str]) -> None:
        """
        Replace all values of key.

        The new values take the position of the first existing entry for
        key, or go to the end if key is new.
        """
        if key == '':
            self.message = values[0] if values else ''
            return
        entries = []
        placed = False
        for k, v in self._entries:
            if k != key:
                entries.append((k, v))
            elif not placed:
                entries.extend((key, new) for new in values)
                placed = True
        if not placed:
            entries.extend((key, new) for new in values)
        self._entries = entries

    def keys(self) -> List[str]:
        """Distinct header keys in order of first appearance."""
        seen = []
        for key, _ in self._entries:
            if key not in seen:
                seen.append(key)
        return seen

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate header entries in order (message excluded)."""
        return iter(self._entries)

    def __getitem__(self, key: str) -> List[str]:
        values = self.get(key)
        if not values:
            raise KeyError(key)
        return values

    def __contains__(self, key: str) -> bool:
        return key == '' or any(k == key for k, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KVLM):
            return NotImplemented
        return self._entries == other._entries and self.message == other.message

    def __repr__(self) -> str:
        return f"KVLM(entries={self._entries!r}, message={self.message!r})"


def parse_kvlm(raw: bytes) -> KVLM:
    """
    Parse KVLM bytes.

    Args:
        raw: Serialized headers and message

    Returns:
        KVLM: Parsed entries, in their original order

    Raises:
        MalformedKVLM: If a header is unterminated or the message is not
            preceded by a blank line
    """
    text = raw.decode(_ENCODING, _ERRORS)
    kvlm = KVLM()
    start = 0

    while True:
        space = text.find(' ', start)
        newline = text.find('\n', start)

        # No space before the next newline: only the blank line that opens
        # the message may appear here.
        if space < 0 or newline < space:
            if newline != start:
                raise MalformedKVLM(start, "expected blank line before message")
            kvlm.add('', text[start + 1:])
            return kvlm

        key = text[start:space]

        end = space
        while True:
            end = text.find('\n', end + 1)
            if end < 0:
                raise MalformedKVLM(start, f"unterminated value for key {key!r}")
            if end + 1 >= len(text) or text[end + 1] != ' ':
                break

        value = text[space + 1:end].replace('\n ', '\n')
        kvlm.add(key, value)
        start = end + 1


def serialize_kvlm(kvlm: KVLM) -> bytes:
    """
    Serialize a KVLM back to bytes.

    Args:
        kvlm: Entries and message

    Returns:
        bytes: Header lines, a blank line, then the message
    """
    out = []
    for key, value in kvlm.items():
        folded = value.replace('\n', '\n ')
        out.append(f"{key} {folded}\n")
    out.append('\n')
    out.append(kvlm.message)
    return ''.join(out).encode(_ENCODING, _ERRORS)
