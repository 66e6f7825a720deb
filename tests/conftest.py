"""Shared pytest fixtures for all tests."""

import random
import pytest

from config import Config
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary data directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "flatbank",
        data_dir=tmp_path / "flatbank" / "database",
        log_level="DEBUG",
        log_dir=tmp_path / "flatbank" / "logs",
    )


@pytest.fixture
def services(test_config):
    """Create a Services container over an empty data directory.

    The random source is seeded so account numbers are reproducible.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    services = Services(test_config, rng=random.Random(1234))
    services.storage.ensure()
    return services


@pytest.fixture
def scripted_input(monkeypatch):
    """Replace input() with a fixed list of answers.

    Once the answers run out input() raises EOFError, like a closed stdin.

    Returns:
        Callable taking the answers in the order they will be read.
    """

    def feed(*answers):
        replies = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(replies)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return feed
