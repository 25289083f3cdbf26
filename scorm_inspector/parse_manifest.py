from __future__ import annotations
from pathlib import Path
from typing import Any
import xml.etree.ElementTree as ET


def _local_name(tag: Any) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1].lower()


def _first_title(root: ET.Element) -> str | None:
    for el in root.iter():
        if _local_name(el.tag) != "title":
            continue
        text = (el.text or "").strip()
        if text:
            return text
    return None


def _first_organization(root: ET.Element) -> str | None:
    for el in root.iter():
        if _local_name(el.tag) == "organization" and el.get("identifier"):
            return el.get("identifier")
    return None


def _resource_hrefs(root: ET.Element) -> list[str]:
    return [
        el.get("href")
        for el in root.iter()
        if _local_name(el.tag) == "resource" and el.get("href")
    ]


def parse_manifest_text(text: str | bytes, source: str = "imsmanifest.xml") -> dict[str, Any]:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"Malformed manifest {source}: {exc}") from exc

    return {
        "title": _first_title(root),
        "organization": _first_organization(root),
        "resources": _resource_hrefs(root),
    }


def read_manifest_fields(manifest_path: Path) -> dict[str, Any]:
    text = manifest_path.read_bytes()
    return parse_manifest_text(text, source=manifest_path.name)
