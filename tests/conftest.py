"""Shared fixtures for the lsh test suite."""

import os

import pytest


@pytest.fixture
def restore_cwd():
    """Put the working directory back after a test that runs `cd`."""
    cwd = os.getcwd()
    yield cwd
    os.chdir(cwd)
