"""Shared pytest fixtures for gog tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from gog.core.repository import Repository
from gog.core.objects import Blob, Commit


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository.create(temp_dir)


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def sample_commit():
    """Sample commit object with a fixed timestamp."""
    return Commit.create(
        tree_hash='29ff16c9c14e2652b22f8b78bb08a5a07930c147',
        parent_hashes=['206941306e8a8af65b66eaaaea388a7ae24d49a0'],
        author="Test User <test@example.com>",
        committer="Test User <test@example.com>",
        message="Test commit\n",
        timestamp=1527025023,
        timezone='+0200',
    )


@pytest.fixture
def sample_commit_bytes():
    """Raw commit payload with a folded multi-line header."""
    return (
        b"tree 29ff16c9c14e2652b22f8b78bb08a5a07930c147\n"
        b"parent 206941306e8a8af65b66eaaaea388a7ae24d49a0\n"
        b"author Thibault Polge <thibault@thb.lt> 1527025023 +0200\n"
        b"committer Thibault Polge <thibault@thb.lt> 1527025044 +0200\n"
        b"gpgsig -----BEGIN PGP SIGNATURE-----\n"
        b" \n"
        b" iQIzBAABCAAdFiEExwXquOM8bWb4Q3RFJQWTMzJSMUMFAmVQ==\n"
        b" -----END PGP SIGNATURE-----\n"
        b"\n"
        b"Create first draft"
    )
