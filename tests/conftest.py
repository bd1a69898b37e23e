"""Shared pytest fixtures for publicsuffix tests."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from publicsuffix.core.rule_list import RuleList


SAMPLE_SOURCE = """\
// Sample list used by the tests

// ===BEGIN ICANN DOMAINS===
com
net
uk
co.uk
jp
*.kawasaki.jp
!city.kawasaki.jp
*.ck
!www.ck

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===
blogspot.com
github.io
// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "version": 1,
        "settings": {
            "private_domains": False,
            "ignore_private": True,
            "list_path": None,
        },
    }


@pytest.fixture
def temp_config_with_data(temp_config_file, valid_config_data):
    """Create a temporary config file with valid data."""
    temp_config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(temp_config_file, "w", encoding="utf-8") as f:
        json.dump(valid_config_data, f)
    return temp_config_file


@pytest.fixture
def sample_source():
    """Return a small rule source with wildcard, exception and private rules."""
    return SAMPLE_SOURCE


@pytest.fixture
def sample_list_file(temp_dir, sample_source):
    """Write the sample source to a file and return its path."""
    path = temp_dir / "public_suffix_list.dat"
    path.write_text(sample_source, encoding="utf-8")
    return path


@pytest.fixture
def sample_rule_list(sample_source):
    """Return a RuleList parsed from the sample source."""
    return RuleList.from_string(sample_source)
