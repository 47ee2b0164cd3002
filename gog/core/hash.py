"""Hash utilities for gog."""

import hashlib


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character lower-case hex string
    """
    return hashlib.sha1(data).hexdigest()


def frame_object(kind: str, payload: bytes) -> bytes:
    """
    Prefix a payload with its object header.
    
    Format: <kind> <length>\\0<payload>
    
    Args:
        kind: Object type name (blob, commit, ...)
        payload: Serialized object data
        
    Returns:
        bytes: Header followed by payload
    """
    return f"{kind} {len(payload)}\0".encode() + payload


def is_object_address(sha: str) -> bool:
    """Return True if sha looks like a full SHA-1 hex digest."""
    if len(sha) != 40:
        return False
    return all(c in '0123456789abcdef' for c in sha)
