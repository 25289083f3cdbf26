from __future__ import annotations

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
from zipfile import ZipFile


DEFAULT_SCRATCH_PREFIX = "temp_scorm_extract-"


@contextmanager
def scratch_directory(root: Path | None = None, prefix: str = DEFAULT_SCRATCH_PREFIX) -> Iterator[Path]:
    """Yield a fresh extraction directory that is removed on exit, including on error."""
    if root is not None:
        root.mkdir(parents=True, exist_ok=True)
    path = Path(tempfile.mkdtemp(prefix=prefix, dir=str(root) if root is not None else None))
    try:
        yield path
    finally:
        if path.exists():
            shutil.rmtree(path)


def _check_members(zf: ZipFile, target: Path) -> None:
    base = target.resolve()
    for name in zf.namelist():
        dest = (base / name).resolve()
        if dest != base and base not in dest.parents:
            raise ValueError(f"Unsafe path in archive: {name}")


def extract_zip(zip_path: Path, target: Path) -> int:
    target.mkdir(parents=True, exist_ok=True)
    with ZipFile(zip_path) as zf:
        _check_members(zf, target)
        members = zf.infolist()
        zf.extractall(target)
    return len(members)
