"""Pytest configuration and fixtures."""

import pytest
import tempfile
from datetime import datetime
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_document():
    """Nested document made of the canonical JSON types."""
    return {
        "users": {
            "user1": {
                "name": "Alice",
                "email": "alice@example.com",
                "profile": {
                    "age": 30,
                    "score": 97.5,
                    "active": True
                }
            },
            "user2": {
                "name": "Bob",
                "email": None,
                "profile": {
                    "age": 25,
                    "score": -1.25e-3,
                    "active": False
                }
            }
        },
        "tags": ["a", "b", "c"],
        "matrix": [[1, 2], [3, 4], []],
        "empty": {}
    }


@pytest.fixture
def escaped_strings():
    """Strings that need escaping in JSON output."""
    return [
        "plain",
        "quote \" inside",
        "back\\slash",
        "line\nbreak",
        "tab\tand\rreturn",
        "\b\f",
        "\x00\x05\x1f",
        "unicode ünïcödé ✓",
    ]


@pytest.fixture
def sample_datetime():
    return datetime(2024, 1, 5, 9, 3, 7)
