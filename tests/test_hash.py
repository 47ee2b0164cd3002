"""Hash utilities tests."""

import pytest
from gog.core.hash import hash_object, frame_object, is_object_address


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert result == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    data = b'hello world'
    assert hash_object(data) == hash_object(data)


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


def test_frame_object():
    """Test header is type, space, decimal size and null byte."""
    assert frame_object('blob', b'hello\n') == b'blob 6\x00hello\n'
    assert frame_object('commit', b'') == b'commit 0\x00'


def test_hash_of_framed_blob_matches_git():
    """Test hashing matches `git hash-object` output."""
    assert hash_object(frame_object('blob', b'hello\n')) == 'ce013625030ba8dba906f756967f9e9ca394464a'


@pytest.mark.parametrize('sha, expected', [
    ('ce013625030ba8dba906f756967f9e9ca394464a', True),
    ('CE013625030BA8DBA906F756967F9E9CA394464A', False),
    ('ce01362', False),
    ('ce013625030ba8dba906f756967f9e9ca394464g', False),
    ('', False),
])
def test_is_object_address(sha, expected):
    """Test only full lower-case hex digests are accepted."""
    assert is_object_address(sha) is expected
