# topmark:header:start
#
#   project      : PkgSurface
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PkgSurface test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable settings split:

    - Build settings with `pkgsurface.config.MutableSettings`, then
      `freeze()` them into `pkgsurface.config.Settings` for **public API**
      calls (``pkgsurface.api.generate/check_artifacts``).
    - Do **not** mutate frozen `Settings`. If you need to tweak them, call
      `Settings.thaw()`, edit the returned `MutableSettings`, then `freeze()`
      again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from pkgsurface.config import MutableSettings
from pkgsurface.config import logging as pkglogging
from tests.model_factory import echo_model, weather_model, write_model

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsurface.config import Settings

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak into test runs.

    Clears the log level override, the snapshot mode variable and the color
    switches, all of which change command output.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in ("PKGSURFACE_LOG_LEVEL", "SNAPSHOT_MODE", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    pkglogging.setup_logging(level=pkglogging.TRACE_LEVEL)


@pytest.fixture
def echo_model_path(tmp_path: Path) -> Path:
    """Write the single-operation ``Echo`` model and return its path.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        Path: Path to ``model.json``.
    """
    return write_model(tmp_path / "model.json", echo_model())


@pytest.fixture
def weather_model_path(tmp_path: Path) -> Path:
    """Write the ``Weather`` model (resources, enums, errors, helpers) and return its path.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        Path: Path to ``model.json``.
    """
    return write_model(tmp_path / "model.json", weather_model())


def make_settings(**overrides: Any) -> Settings:
    """Return frozen `Settings` built from the defaults and ``overrides``.

    Args:
        **overrides (Any): Field values keyed by `Settings` field name.

    Returns:
        Settings: The frozen settings.
    """
    return MutableSettings.from_defaults().apply_overrides(overrides).freeze()
