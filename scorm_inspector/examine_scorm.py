"""
Examine a SCORM package.

Extracts the archive into a scratch directory, prints its contents, reads the
imsmanifest.xml fields and lists the HTML launch files. The scratch directory
is removed when the run finishes, whether or not it succeeded.

Usage:
    examine-scorm path/to/scorm.zip
    python -m scorm_inspector.examine_scorm path/to/scorm.zip --scratch-root .tmp
"""

from __future__ import annotations

import argparse
import json
from importlib import resources
from pathlib import Path
from typing import Any

from scorm_inspector.extract_package import DEFAULT_SCRATCH_PREFIX, extract_zip, scratch_directory
from scorm_inspector.list_contents import find_html_files, find_manifest, list_entries
from scorm_inspector.parse_manifest import read_manifest_fields
from scorm_inspector.render_report import render_report


DEFAULT_CONFIG = resources.files("scorm_inspector") / "config" / "inspect.config.json"

DEFAULTS: dict[str, Any] = {
    "scratch": {"prefix": DEFAULT_SCRATCH_PREFIX, "root": None},
    "manifest_name": "imsmanifest.xml",
    "html_extensions": [".html"],
    "usage_examples": [],
}


def load_json(path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Merge a config file over DEFAULTS. Only an explicitly given path must exist."""
    if path is not None:
        cfg = load_json(path)
    elif DEFAULT_CONFIG.is_file():
        cfg = load_json(DEFAULT_CONFIG)
    else:
        cfg = {}
    merged = {**DEFAULTS, **cfg}
    merged["scratch"] = {**DEFAULTS["scratch"], **(cfg.get("scratch") or {})}
    return merged


def _scratch_root(cfg: dict[str, Any], override: Path | None) -> Path | None:
    if override is not None:
        return override.resolve()
    configured = cfg["scratch"].get("root")
    if not configured:
        return None
    return Path(configured).expanduser().resolve()


def inspect_package(zip_path: Path, scratch_root: Path | None, cfg: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {
        "zip_path": str(zip_path),
        "entries": [],
        "manifest_path": None,
        "manifest": None,
        "manifest_error": None,
        "html_files": [],
    }

    with scratch_directory(scratch_root, cfg["scratch"]["prefix"]) as extract_dir:
        print("Extracting SCORM package...")
        count = extract_zip(zip_path, extract_dir)
        print(f"Info: extracted {count} archive entries")

        result["entries"] = list_entries(extract_dir)

        manifest = find_manifest(extract_dir, cfg["manifest_name"])
        if manifest is not None:
            result["manifest_path"] = manifest.relative_to(extract_dir).as_posix()
            try:
                result["manifest"] = read_manifest_fields(manifest)
            except (OSError, ValueError) as exc:
                result["manifest_error"] = str(exc)

        extensions = tuple(cfg["html_extensions"])
        result["html_files"] = [
            p.relative_to(extract_dir).as_posix() for p in find_html_files(extract_dir, extensions)
        ]

    return result


def _build_parser(cfg: dict[str, Any]) -> argparse.ArgumentParser:
    examples = "\n".join(f"  {line}" for line in cfg["usage_examples"])
    parser = argparse.ArgumentParser(
        prog="examine-scorm",
        description="Extract a SCORM zip, list its contents, and summarize its manifest.",
        epilog=f"Examples:\n{examples}" if examples else None,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("zip_path", nargs="?", type=Path, help="Path to the SCORM .zip package.")
    parser.add_argument(
        "--scratch-root",
        type=Path,
        default=None,
        help="Directory to create the temporary extraction folder in (default: system temp dir).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to an inspect config JSON file.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path, default=None)
    known, _rest = pre.parse_known_args(argv)
    try:
        cfg = load_config(known.config)
    except (OSError, ValueError) as exc:
        print(f"Error: cannot read config {known.config}: {exc}")
        return 1

    parser = _build_parser(cfg)
    args, extra = parser.parse_known_args(argv)
    if extra:
        print(f"Warning: ignoring unrecognized arguments: {' '.join(extra)}")

    if args.zip_path is None:
        parser.print_help()
        return 1

    zip_path: Path = args.zip_path
    print(f"\nExamining SCORM package: {zip_path}\n")

    if not zip_path.is_file():
        print(f"Error: file not found: {zip_path}")
        return 0

    try:
        result = inspect_package(zip_path, _scratch_root(cfg, args.scratch_root), cfg)
        report = render_report(result)
    except Exception as exc:
        print(f"Error examining SCORM package: {exc}")
        return 0

    print()
    print(report)
    print("\nAnalysis complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
