"""Shared fixtures for the argcompose tests."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from argcompose import opt_integral  # noqa: E402
from argcompose import opt_text  # noqa: E402
from argcompose import switch  # noqa: E402


@pytest.fixture(autouse=True)
def _fixed_columns(monkeypatch):
    """Keep argparse help output on a stable width."""

    monkeypatch.setenv('COLUMNS', '100')


@pytest.fixture
def greeting():
    """The name/age parser used through the examples."""

    return opt_text('name', 'Your first name') & opt_integral('age', 'Your current age')


@pytest.fixture
def verbose_name():
    return switch('verbose', 'Print more') & opt_text('name')
