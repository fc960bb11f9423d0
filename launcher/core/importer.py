"""Game bundle importer — ZIP extraction and entry point discovery."""

from __future__ import annotations

import shutil
import zipfile
from pathlib import Path

from loguru import logger

from launcher.utils import format_size

DEFAULT_HTML_ENTRY_POINTS = ("index.html", "game.html", "main.html")
DEFAULT_EXECUTABLE_EXTENSIONS = (".exe", ".app", ".sh", ".bat")


class BundleError(Exception):
    """Raised when a game bundle cannot be extracted."""


def extract_bundle(zip_path: Path, dest_dir: Path) -> Path:
    """Extract *zip_path* into *dest_dir*.

    On failure the destination is removed and ``BundleError`` is raised.
    """
    if not zip_path.is_file():
        raise BundleError(f"Bundle not found: {zip_path}")

    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(zip_path, "r") as zf:
            total = sum(info.file_size for info in zf.infolist())
            zf.extractall(dest_dir)
    except (zipfile.BadZipFile, OSError) as e:
        shutil.rmtree(dest_dir, ignore_errors=True)
        raise BundleError(f"Could not extract {zip_path.name}: {e}") from e

    logger.info(f"Extracted {zip_path.name} ({format_size(total)}) → {dest_dir}")
    return dest_dir


def find_html_entry(
    game_dir: Path,
    entry_points: tuple[str, ...] | list[str] = DEFAULT_HTML_ENTRY_POINTS,
) -> Path | None:
    """Return the first HTML entry point present in *game_dir*."""
    for name in entry_points:
        candidate = game_dir / name
        if candidate.is_file():
            return candidate
    return None


def find_executable(
    game_dir: Path,
    extensions: tuple[str, ...] | list[str] = DEFAULT_EXECUTABLE_EXTENSIONS,
) -> Path | None:
    """Return the first executable at the root of *game_dir* or one level below."""
    if not game_dir.is_dir():
        return None
    exts = {ext.lower() for ext in extensions}
    for child in sorted(game_dir.iterdir()):
        if child.is_dir():
            for sub in sorted(child.iterdir()):
                if sub.suffix.lower() in exts:
                    return sub
        elif child.suffix.lower() in exts:
            return child
    return None
