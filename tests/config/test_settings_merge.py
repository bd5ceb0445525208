# topmark:header:start
#
#   project      : PkgSurface
#   file         : test_settings_merge.py
#   file_relpath : tests/config/test_settings_merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration discovery, merging and validation.

Layers are merged lowest to highest: defaults, ``[tool.pkgsurface]`` in
``pyproject.toml``, ``pkgsurface.toml``, explicit ``--config`` files, then
overrides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pkgsurface.config.model import MutableSettings, Settings
from pkgsurface.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """Built-in defaults describe the conventional artifact layout."""
    settings: Settings = Settings.defaults()

    assert settings.service == ""
    assert settings.generate_schemas is False
    assert settings.schema_allowlist == ()
    assert settings.output_dir == "test"
    assert settings.types_file == "index-types.ts"
    assert settings.runtime_file == "index-objects.spec.mjs"
    assert settings.snapshot_file == "snapshots.integ.spec.ts"
    assert settings.snapshot_default_mode == "write"
    assert settings.system_time_ms == 946702799999
    assert settings.snapshot_timeout_ms == 30000
    assert settings.config_files == ()
    assert settings.warnings == ()


def test_discovery_precedence(tmp_path: Path) -> None:
    """``pkgsurface.toml`` wins over ``pyproject.toml``; unset keys fall through."""
    _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n'
        "[tool.pkgsurface.output]\n"
        'directory = "from-pyproject"\n'
        'banner = "// pyproject"\n',
    )
    _write(tmp_path / "pkgsurface.toml", '[output]\ndirectory = "from-pkgsurface"\n')
    model: Path = _write(tmp_path / "model.json", "{}")

    settings: Settings = MutableSettings.load_merged(anchor=model).freeze()

    assert settings.output_dir == "from-pkgsurface"
    assert settings.banner == "// pyproject"
    assert settings.types_file == "index-types.ts"
    assert settings.config_files == (
        str(tmp_path / "pyproject.toml"),
        str(tmp_path / "pkgsurface.toml"),
    )


def test_pyproject_without_tool_table_is_ignored(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.pkgsurface]`` contributes nothing."""
    _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')

    settings: Settings = MutableSettings.load_merged(anchor=tmp_path).freeze()

    assert settings == Settings.defaults()


def test_explicit_files_merge_in_order(tmp_path: Path) -> None:
    """Explicit config files apply after discovery, later files winning."""
    _write(tmp_path / "pkgsurface.toml", '[generator]\nservice = "a#Discovered"\n')
    first: Path = _write(tmp_path / "first.toml", '[generator]\nservice = "a#First"\n')
    second: Path = _write(
        tmp_path / "second.toml",
        '[generator]\nservice = "a#Second"\n\n[schema]\ngenerate_schemas = true\n',
    )

    settings: Settings = MutableSettings.load_merged(
        anchor=tmp_path, extra_config_files=[first, second]
    ).freeze()
    assert settings.service == "a#Second"
    assert settings.generate_schemas is True

    reversed_order: Settings = MutableSettings.load_merged(
        anchor=tmp_path, extra_config_files=[second, first]
    ).freeze()
    assert reversed_order.service == "a#First"


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    """``no_config`` ignores files next to the model but keeps explicit ones."""
    _write(tmp_path / "pkgsurface.toml", '[output]\ndirectory = "discovered"\n')
    extra: Path = _write(tmp_path / "extra.toml", '[output]\nbanner = "// extra"\n')

    settings: Settings = MutableSettings.load_merged(
        anchor=tmp_path, extra_config_files=[extra], no_config=True
    ).freeze()

    assert settings.output_dir == "test"
    assert settings.banner == "// extra"


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    """An explicit config file must exist."""
    with pytest.raises(ConfigError, match="Config file not found"):
        MutableSettings.load_merged(extra_config_files=[tmp_path / "nope.toml"])


def test_invalid_toml_raises(tmp_path: Path) -> None:
    """Malformed TOML is a configuration error."""
    bad: Path = _write(tmp_path / "bad.toml", "[output\ndirectory = 1\n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        MutableSettings.load_merged(extra_config_files=[bad])


def test_unknown_sections_and_keys_warn(tmp_path: Path) -> None:
    """Unknown sections and keys are ignored with a recorded warning."""
    cfg: Path = _write(
        tmp_path / "cfg.toml",
        '[output]\ndirectory = "out"\ncolour = "red"\n\n[extras]\nflag = true\n',
    )

    settings: Settings = MutableSettings.load_merged(extra_config_files=[cfg]).freeze()

    assert settings.output_dir == "out"
    assert "Ignoring unknown key [output].colour" in settings.warnings
    assert "Ignoring unknown section [extras]" in settings.warnings


def test_wrong_types_warn_and_fall_back(tmp_path: Path) -> None:
    """Values of the wrong type are ignored; the default applies."""
    cfg: Path = _write(
        tmp_path / "cfg.toml",
        "[output]\ndirectory = 3\n\n"
        '[snapshot]\ntimeout_ms = "soon"\n\n'
        '[schema]\ngenerate_schemas = "yes"\nallowlist = ["a#S", 1]\n',
    )

    settings: Settings = MutableSettings.load_merged(extra_config_files=[cfg]).freeze()

    assert settings.output_dir == "test"
    assert settings.snapshot_timeout_ms == 30000
    assert settings.generate_schemas is False
    assert settings.schema_allowlist == ("a#S",)
    assert "Expected string in [output].directory, got int: 3" in settings.warnings
    prefixes: tuple[str, ...] = (
        "Expected int in [snapshot].timeout_ms",
        "Expected bool in [schema].generate_schemas",
        "Ignoring non-string entry in [schema].allowlist",
    )
    for prefix in prefixes:
        assert any(w.startswith(prefix) for w in settings.warnings), prefix


def test_unsupported_default_mode_falls_back(tmp_path: Path) -> None:
    """Only ``write`` and ``compare`` are accepted as the default snapshot mode."""
    cfg: Path = _write(tmp_path / "cfg.toml", '[snapshot]\ndefault_mode = "replay"\n')

    settings: Settings = MutableSettings.load_merged(extra_config_files=[cfg]).freeze()

    assert settings.snapshot_default_mode == "write"
    assert any("default_mode" in w and "replay" in w for w in settings.warnings)


def test_overrides_win_and_none_is_ignored() -> None:
    """Overrides apply last; None leaves the lower layer in place."""
    settings: Settings = (
        MutableSettings.from_defaults()
        .apply_overrides({"output_dir": "gen", "banner": None, "schema_allowlist": ("a#S",)})
        .freeze()
    )

    assert settings.output_dir == "gen"
    assert settings.banner == "// pkgsurface generated code"
    assert settings.schema_allowlist == ("a#S",)


def test_unknown_override_raises() -> None:
    """Overrides must name a known setting."""
    with pytest.raises(ConfigError, match="Unknown setting: colour"):
        MutableSettings.from_defaults().apply_overrides({"colour": "red"})


def test_thaw_freeze_roundtrip() -> None:
    """Thawing and refreezing preserves every value."""
    settings: Settings = (
        MutableSettings.from_defaults()
        .apply_overrides({"service": "a#S", "schema_allowlist": ["a#S"]})
        .freeze()
    )

    assert settings.thaw().freeze() == settings
