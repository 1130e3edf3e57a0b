"""
Pytest configuration and fixtures
"""

import sys

import pytest

from actionwalk.testing import Link, TreeBuilder


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests excluded by run_tests.py")


@pytest.fixture
def simple_tree(tmp_path):
    """
    Create the two-level tree used throughout the tests:

    top/
    ├── a.txt            (10 bytes)
    └── sub/
        ├── b.txt        (20 bytes)
        └── deeper/
            └── c.txt    (5 bytes)
    """
    builder = TreeBuilder(tmp_path / "top")
    builder.build({
        "a.txt": "a" * 10,
        "sub": {
            "b.txt": "b" * 20,
            "deeper": {"c.txt": "c" * 5},
        },
    })
    return builder.root


@pytest.fixture
def link_tree(tmp_path):
    """
    Create a tree with symbolic links to a file and to a directory:

    top/
    ├── data.bin         (1000 bytes)
    ├── data-link -> data.bin
    ├── dir/
    │   └── inner.txt    (7 bytes)
    └── dir-link -> dir
    """
    if sys.platform == "win32":
        pytest.skip("symbolic links need a POSIX filesystem")
    builder = TreeBuilder(tmp_path / "top")
    builder.build({
        "data.bin": b"\0" * 1000,
        "data-link": Link("data.bin"),
        "dir": {"inner.txt": "x" * 7},
        "dir-link": Link("dir", target_is_directory=True),
    })
    return builder.root
