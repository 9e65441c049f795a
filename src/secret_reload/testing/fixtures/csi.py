"""Testing fixtures – CsiSecretMount, an on-disk secrets-store mount.

Reproduces the layout the Kubernetes atomic writer (used by the secrets
store CSI driver) leaves behind::

    <root>/
        ..2026_01_01_12_00_00.000001/my-secret   real file
        ..data -> ..2026_01_01_12_00_00.000001   indirection symlink
        my-secret -> ..data/my-secret            user-facing symlink

A rotation writes a new versioned directory, points a temporary symlink at
it and renames that over ``..data`` in a single ``rename(2)``.
"""
from __future__ import annotations

import os
import pathlib
import shutil
import time
from datetime import UTC, datetime

import pytest

from secret_reload.application.watch.filters import DATA_DIR_ENTRY

_DATA_TMP = "..data_tmp"


class CsiSecretMount:
    """Drive a CSI-style mount from a test."""

    def __init__(self, root: pathlib.Path, name: str = "my-secret") -> None:
        self.root = root
        self.name = name
        self._generation = 0

    @property
    def path(self) -> pathlib.Path:
        """The user-facing secret path (``<root>/<name>``)."""
        return self.root / self.name

    @property
    def data_link(self) -> pathlib.Path:
        return self.root / DATA_DIR_ENTRY

    def current_dir(self) -> pathlib.Path | None:
        if not os.path.lexists(self.data_link):
            return None
        return self.root / os.readlink(self.data_link)

    def write(self, value: str) -> pathlib.Path:
        """Publish *value* through an atomic ``..data`` swap."""
        self.root.mkdir(parents=True, exist_ok=True)
        previous = self.current_dir()

        self._generation += 1
        stamp = datetime.now(UTC).strftime("%Y_%m_%d_%H_%M_%S")
        version_dir = self.root / f"..{stamp}.{self._generation:06d}"
        version_dir.mkdir()
        (version_dir / self.name).write_text(value, encoding="utf-8")

        tmp_link = self.root / _DATA_TMP
        if os.path.lexists(tmp_link):
            tmp_link.unlink()
        os.symlink(version_dir.name, tmp_link)
        os.rename(tmp_link, self.data_link)

        if not os.path.lexists(self.path):
            os.symlink(os.path.join(DATA_DIR_ENTRY, self.name), self.path)
        if previous is not None and previous != version_dir:
            shutil.rmtree(previous, ignore_errors=True)
        return version_dir

    def overwrite_in_place(self, value: str) -> None:
        """Rewrite the current file without a swap (a non-atomic writer)."""
        current = self.current_dir()
        if current is None:
            raise FileNotFoundError(self.data_link)
        (current / self.name).write_text(value, encoding="utf-8")

    def slow_write(self, parts: list[str], delay: float) -> None:
        """Write *parts* one after another into the live file, pausing in between."""
        for index, part in enumerate(parts):
            if index:
                time.sleep(delay)
            self.overwrite_in_place(part)

    def remove(self) -> None:
        """Delete the whole mount root (backend goes away)."""
        shutil.rmtree(self.root, ignore_errors=True)


@pytest.fixture
def csi_mount(tmp_path: pathlib.Path) -> CsiSecretMount:
    """Pytest fixture: an empty CSI mount rooted at ``tmp_path / "secrets-store"``."""
    return CsiSecretMount(tmp_path / "secrets-store")


__all__ = ["CsiSecretMount", "csi_mount"]
