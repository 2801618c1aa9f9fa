# Configuration for the tests.
# Use `py.test` to run the tests.

# (This file needs to be in or above the directory where py.test is called)

from io import BytesIO

import pytest


def pytest_addoption(parser):
    group = parser.getgroup("pmdsir0")
    group.addoption("--all", action="store_true", default=False,
        help="Run all tests, even those that take a lot of time")

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running fuzz tests, only run with --all")

def pytest_runtest_setup(item):
    if 'slow' in item.keywords and not item.config.getoption('--all'):
        pytest.skip("skipping slow tests")

@pytest.fixture
def sir0_bytes():
    """A small hand-assembled SIR0 file.

    The header holds two pointers, at 0x10 and 0x14, plus the two pointers in
    the SIR0 header itself.
    """
    return (
        b'SIR0'
        + (0x10).to_bytes(4, 'little')
        + (0x20).to_bytes(4, 'little')
        + bytes(4)
        # header data, 0x10..0x20
        + bytes.fromhex('18000000 1c000000 deadbeef cafef00d')
        # pointer list: 4, 8, 0x10, 0x14, then the terminator
        + bytes([0x04, 0x04, 0x08, 0x04, 0x00])
        + bytes([0xaa]) * 11
    )

@pytest.fixture
def sir0_stream(sir0_bytes):
    return BytesIO(sir0_bytes)
