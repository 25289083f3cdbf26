"""
Pytest configuration and fixtures
"""
from pathlib import Path
import sys
import zipfile

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def make_zip(tmp_path):
    """Factory that writes a zip from a {member name: content} mapping"""
    def _make(members, name="package.zip"):
        zip_path = tmp_path / name
        with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zf:
            for member, content in members.items():
                zf.writestr(member, content)
        return zip_path
    return _make


@pytest.fixture
def scratch_root(tmp_path):
    root = tmp_path / "scratch"
    root.mkdir()
    return root
