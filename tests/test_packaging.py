"""
Tests that the installed distribution carries what the CLI loads at runtime
"""
from importlib import resources
from pathlib import Path

import pytest

from scorm_inspector import examine_scorm
from scorm_inspector.render_report import REPORT_TEMPLATE


PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_default_config_and_template_are_package_resources():
    package = resources.files("scorm_inspector")
    assert (package / "templates" / REPORT_TEMPLATE).is_file()
    assert (package / "config" / "inspect.config.json").is_file()
    assert examine_scorm.DEFAULT_CONFIG.is_file()


def test_pyproject_ships_resources_and_console_script():
    tomllib = pytest.importorskip("tomllib")
    data = tomllib.loads((PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8"))

    assert data["project"]["scripts"]["examine-scorm"] == "scorm_inspector.examine_scorm:main"
    assert "scorm_inspector" in data["tool"]["setuptools"]["packages"]

    package_dir = PROJECT_ROOT / "scorm_inspector"
    shipped = set()
    for pattern in data["tool"]["setuptools"]["package-data"]["scorm_inspector"]:
        shipped.update(p.relative_to(package_dir).as_posix() for p in package_dir.glob(pattern))
    assert f"templates/{REPORT_TEMPLATE}" in shipped
    assert "config/inspect.config.json" in shipped


def test_console_script_target_is_callable():
    module_name, func_name = "scorm_inspector.examine_scorm:main".split(":")
    module = __import__(module_name, fromlist=[func_name])
    assert callable(getattr(module, func_name))
