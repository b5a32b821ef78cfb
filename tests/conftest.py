# tests/conftest.py
import pytest

import quantikit.units.registry as regmod
from quantikit.kinds import BUILTIN_KINDS
from quantikit.units.registry import Registry


@pytest.fixture()
def reg():
    """Fresh registry with the built-in kinds, isolated per test."""
    return Registry(BUILTIN_KINDS)


@pytest.fixture()
def patched_default(monkeypatch, reg):
    """Temporarily install an isolated registry as the process-wide default."""
    monkeypatch.setattr(regmod, "_DEFAULT_REGISTRY", reg)
    yield reg
