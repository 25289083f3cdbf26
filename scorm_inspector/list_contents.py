from __future__ import annotations
from pathlib import Path
from typing import Any


SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_file_size(size_bytes: int) -> str:
    if size_bytes <= 0:
        return "0 B"
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[unit]}"


def _children(directory: Path) -> list[Path]:
    return sorted(directory.iterdir(), key=lambda p: p.name)


def list_entries(root: Path) -> list[dict[str, Any]]:
    """Depth-first listing of everything under root, directories before their contents."""
    entries: list[dict[str, Any]] = []

    def walk(directory: Path, depth: int) -> None:
        for item in _children(directory):
            rel = item.relative_to(root).as_posix()
            if item.is_dir():
                entries.append(
                    {"name": item.name, "path": rel, "depth": depth, "is_dir": True, "size": 0, "size_label": ""}
                )
                walk(item, depth + 1)
                continue
            size = item.stat().st_size
            entries.append(
                {
                    "name": item.name,
                    "path": rel,
                    "depth": depth,
                    "is_dir": False,
                    "size": size,
                    "size_label": format_file_size(size),
                }
            )

    walk(root, 0)
    return entries


def find_manifest(root: Path, name: str = "imsmanifest.xml") -> Path | None:
    wanted = name.lower()
    for item in _children(root):
        if item.is_dir():
            found = find_manifest(item, name)
            if found:
                return found
        elif item.name.lower() == wanted:
            return item
    return None


def find_html_files(root: Path, extensions: tuple[str, ...] = (".html",)) -> list[Path]:
    wanted = {ext.lower() for ext in extensions}
    html_files: list[Path] = []
    for item in _children(root):
        if item.is_dir():
            html_files.extend(find_html_files(item, extensions))
        elif item.suffix.lower() in wanted:
            html_files.append(item)
    return html_files
