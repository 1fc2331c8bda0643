# topmark:header:start
#
#   project      : tgcom
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Pytest configuration for the tgcom test suite.

Sets up global fixtures and logging for test runs.

Notes:
    Tests should respect the mutable/immutable configuration split: build a
    `tgcom.config.model.MutableRunConfig`, then `freeze()` it into a
    `tgcom.config.model.RunConfig` before handing it to the batch driver.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from tgcom.config import logging
from tgcom.config.model import MutableRunConfig, RunConfig
from tgcom.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tgcom_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE while the suite runs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory that stops config discovery.

    The ``tgcom.toml`` with ``root = true`` keeps config files of the machine
    running the tests out of the merge.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "tgcom.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def write_source(path: Path, text: str) -> Path:
    """Write ``text`` verbatim (no newline translation) and return ``path``."""
    path.write_bytes(text.encode("utf-8"))
    return path


def read_source(path: Path) -> str:
    """Read ``path`` verbatim (no newline translation)."""
    return path.read_bytes().decode("utf-8")


def make_config(**overrides: Any) -> RunConfig:
    """Return a frozen `RunConfig` built from defaults and ``overrides``.

    Args:
        **overrides (Any): Fields set on the `MutableRunConfig` before freezing.

    Returns:
        RunConfig: The frozen configuration.
    """
    m = MutableRunConfig()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
