# topmark:header:start
#
#   project      : PkgSurface
#   file         : api.py
#   file_relpath : src/pkgsurface/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public PkgSurface API (stable surface).

This module exposes a small, typed API for integrations that want to generate
or check package-surface artifacts without going through the CLI. Internal
modules remain private.

Typical use:

```python
from pathlib import Path

from pkgsurface import api

artifacts = api.generate(Path("model.json"))
api.write_artifacts(artifacts, Path("packages/my-client"))
```

Configuration contract:
    - When ``settings`` is None, configuration is discovered next to the model
      (``pyproject.toml`` then ``pkgsurface.toml``) and merged over the defaults,
      exactly like the CLI does.
    - ``overrides`` mirrors the `pkgsurface.config.Settings` field names and wins
      over every file layer.

Writes:
    Every artifact is written through a temporary sibling file that replaces the
    target in one rename, so readers never observe a half-written file. A file
    whose content is already up to date is left untouched.
"""

from __future__ import annotations

import difflib
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from yachalk import chalk

from pkgsurface.config.logging import get_logger
from pkgsurface.config.model import MutableSettings, Settings
from pkgsurface.emitters.recheck import read_structure
from pkgsurface.emitters.registry import ArtifactKind, GeneratedArtifact, render_all
from pkgsurface.model.loader import load_model
from pkgsurface.surface.plan import SurfacePlan, build_plan
from pkgsurface.surface.types import SurfaceEntry, TestKind
from pkgsurface.utils.diff import render_patch

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.model.shapes import Model

logger: PkgSurfaceLogger = get_logger(__name__)

__all__: list[str] = [
    "ArtifactKind",
    "CheckResult",
    "CheckStatus",
    "GeneratedArtifact",
    "Settings",
    "SurfaceEntry",
    "TestKind",
    "WriteResult",
    "WriteStatus",
    "check_artifacts",
    "enumerate_entries",
    "generate",
    "load_settings",
    "plan",
    "write_artifacts",
]


class WriteStatus(str, Enum):
    """Outcome of writing one artifact."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class CheckStatus(str, Enum):
    """Outcome of comparing one artifact with the file on disk."""

    IN_SYNC = "in_sync"
    CHANGED = "changed"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Result of writing one artifact.

    Attributes:
        relpath (str): Artifact path relative to the package root.
        path (Path): Absolute or root-relative path written.
        status (WriteStatus): What happened to the file.
        bytes_written (int): UTF-8 bytes written; 0 when unchanged.
    """

    relpath: str
    path: Path
    status: WriteStatus
    bytes_written: int = 0


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of checking one artifact.

    Attributes:
        relpath (str): Artifact path relative to the package root.
        status (CheckStatus): Comparison outcome.
        diff (str): Unified diff from the file on disk to the expected content;
            empty when in sync.
    """

    relpath: str
    status: CheckStatus
    diff: str = ""

    @property
    def would_change(self) -> bool:
        """True when writing the artifact would modify the file system."""
        return self.status is not CheckStatus.IN_SYNC


def load_settings(
    model_path: Path,
    *,
    config_files: Iterable[Path] | None = None,
    no_config: bool = False,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Resolve settings for ``model_path`` the way the CLI does.

    Args:
        model_path (Path): Model file; its directory anchors config discovery.
        config_files (Iterable[Path] | None): Extra config files, merged in order.
        no_config (bool): Skip discovery next to the model.
        overrides (Mapping[str, Any] | None): Highest-precedence values, keyed by
            `Settings` field name; None values are ignored.

    Returns:
        Settings: The frozen settings.

    Raises:
        ConfigError: If a config file is missing or malformed, or an override is unknown.
    """
    draft: MutableSettings = MutableSettings.load_merged(
        anchor=model_path,
        extra_config_files=config_files,
        no_config=no_config,
    )
    if overrides:
        draft.apply_overrides(overrides)
    return draft.freeze()


def _resolve(
    model_path: Path, settings: Settings | None, service: str | None
) -> tuple[Model, Settings]:
    if settings is None:
        settings = load_settings(model_path)
    if service:
        settings = settings.thaw().apply_overrides({"service": service}).freeze()
    return load_model(model_path), settings


def plan(
    model_path: Path,
    settings: Settings | None = None,
    *,
    service: str | None = None,
) -> SurfacePlan:
    """Load ``model_path`` and resolve the generation plan of its service."""
    model, resolved = _resolve(model_path, settings, service)
    return build_plan(model, resolved)


def generate(
    model_path: Path,
    settings: Settings | None = None,
    *,
    service: str | None = None,
    kinds: Iterable[ArtifactKind] | None = None,
) -> tuple[GeneratedArtifact, ...]:
    """Render the verification artifacts of the service in ``model_path``.

    Args:
        model_path (Path): Smithy JSON AST (``.json``) or TOML (``.toml``) model.
        settings (Settings | None): Settings to use; discovered when None.
        service (str | None): Service shape id; overrides ``settings.service``.
        kinds (Iterable[ArtifactKind] | None): Artifacts to render; all when None.

    Returns:
        tuple[GeneratedArtifact, ...]: Rendered artifacts, not yet written.

    Raises:
        ModelError: If the model is malformed or the service cannot be selected.
        SymbolResolutionError: If a shape has no usable symbol name.
        SurfaceConflictError: If two exports collide.
    """
    model, resolved = _resolve(model_path, settings, service)
    return render_all(build_plan(model, resolved), resolved, kinds)


def enumerate_entries(
    model_path: Path,
    kind: TestKind,
    settings: Settings | None = None,
    *,
    service: str | None = None,
) -> tuple[SurfaceEntry, ...]:
    """Return the surface enumeration of ``kind`` for the service in ``model_path``."""
    return plan(model_path, settings, service=service).entries(kind)


def _read_text(path: Path) -> str | None:
    if not path.is_file():
        return None
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _atomic_write(path: Path, text: str) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp: Path = path.with_name(f".{path.name}.pkgsurface-tmp")
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()
    return len(text.encode("utf-8"))


def write_artifacts(artifacts: Sequence[GeneratedArtifact], root: Path) -> list[WriteResult]:
    """Write ``artifacts`` under ``root``.

    Args:
        artifacts (Sequence[GeneratedArtifact]): Rendered artifacts.
        root (Path): Package root the artifact paths are relative to.

    Returns:
        list[WriteResult]: One result per artifact, in input order.

    Raises:
        OSError: If a file cannot be written.
    """
    results: list[WriteResult] = []
    for artifact in artifacts:
        path: Path = root / artifact.relpath
        current: str | None = _read_text(path)
        if current == artifact.text:
            logger.debug("Unchanged: %s", path)
            results.append(WriteResult(artifact.relpath, path, WriteStatus.UNCHANGED))
            continue
        written: int = _atomic_write(path, artifact.text)
        status: WriteStatus = WriteStatus.CREATED if current is None else WriteStatus.UPDATED
        logger.info("%s: %s (%d bytes)", status.value.capitalize(), path, written)
        results.append(WriteResult(artifact.relpath, path, status, written))
    return results


def _unified_diff(relpath: str, current: list[str], expected: list[str]) -> str:
    patch_lines: list[str] = list(
        difflib.unified_diff(
            current,
            expected,
            fromfile=f"{relpath} (current)",
            tofile=f"{relpath} (expected)",
            n=3,
            lineterm="",
        )
    )
    return "\n".join(patch_lines) + "\n" if patch_lines else ""


def check_artifacts(
    artifacts: Sequence[GeneratedArtifact],
    root: Path,
    *,
    structural: bool = False,
) -> list[CheckResult]:
    """Compare ``artifacts`` with the files under ``root``.

    Args:
        artifacts (Sequence[GeneratedArtifact]): Rendered artifacts.
        root (Path): Package root the artifact paths are relative to.
        structural (bool): Compare only what each artifact checks (exports,
            assertions, schema mapping), ignoring comments and formatting.

    Returns:
        list[CheckResult]: One result per artifact, in input order.
    """
    results: list[CheckResult] = []
    for artifact in artifacts:
        path: Path = root / artifact.relpath
        current: str | None = _read_text(path)
        if current is None:
            logger.debug("Missing: %s", path)
            diff: str = _unified_diff(artifact.relpath, [], artifact.text.splitlines())
            results.append(CheckResult(artifact.relpath, CheckStatus.MISSING, diff))
            continue
        if structural:
            old: list[str] = read_structure(artifact.kind, current)
            new: list[str] = read_structure(artifact.kind, artifact.text)
        else:
            old = current.splitlines()
            new = artifact.text.splitlines()
            if old == new and current != artifact.text:
                # Only line endings or the final newline differ.
                old = current.splitlines(keepends=True)
                new = artifact.text.splitlines(keepends=True)
        diff = _unified_diff(artifact.relpath, old, new)
        if not diff:
            results.append(CheckResult(artifact.relpath, CheckStatus.IN_SYNC))
            continue
        logger.info("Out of sync: %s", path)
        logger.debug("Patch (rendered):\n%s", render_patch(diff))
        logger.trace("\n=== DIFF START ===\n%s=== DIFF END ===", chalk.yellow_bright(diff))
        results.append(CheckResult(artifact.relpath, CheckStatus.CHANGED, diff))
    return results
