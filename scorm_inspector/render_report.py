from __future__ import annotations
from typing import Any
from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape


REPORT_TEMPLATE = "report.txt.j2"


def _env() -> Environment:
    return Environment(
        loader=PackageLoader("scorm_inspector", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html", "xml")),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_report(result: dict[str, Any], template_name: str = REPORT_TEMPLATE) -> str:
    template = _env().get_template(template_name)
    return template.render(
        entries=result["entries"],
        manifest_path=result["manifest_path"],
        manifest=result["manifest"],
        manifest_error=result["manifest_error"],
        html_files=result["html_files"],
    )
