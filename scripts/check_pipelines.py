#!/usr/bin/env python3
"""
Pipeline Checker - CLI tool for validating pipeline configuration files.

Build-time tooling for CI/PR workflows. NOT for runtime use.

Usage:
    # Check one or more JSON files of pipelines
    python scripts/check_pipelines.py config/pipelines.json

    # Machine-readable report
    python scripts/check_pipelines.py config/pipelines.json --json

A file holds either a flat mapping of input key -> pipeline
({"email": "trim|lower"}) or a mapping of form name -> such a mapping
({"signup": {"email": "trim|lower"}}).

Exit codes:
    0 - Every referenced transform is registered
    1 - Unknown transform names found
    2 - A file could not be read, is not a JSON object, or mixes flat
        pipelines with per-form objects
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from input_sanitizer.services.engine import Sanitizer  # noqa: E402

EXIT_OK = 0
EXIT_UNKNOWN = 1
EXIT_UNREADABLE = 2


def load_pipelines(path: Path) -> Optional[Dict[str, Any]]:
    """Load a pipelines JSON object, or None if missing/invalid."""
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def flatten_forms(data: Dict[str, Any]) -> Optional[Dict[str, Dict[str, Any]]]:
    """
    Normalize a file into {form name: {key: pipeline}}.
    A flat file becomes a single form named "default". A file mixing form
    objects with flat keys has no single reading and yields None.
    """
    nested = [isinstance(value, dict) for value in data.values()]
    if nested and all(nested):
        return {name: value for name, value in data.items()}
    if any(nested):
        return None
    return {"default": data}


def check_file(path: Path, sanitizer: Sanitizer) -> Optional[Dict[str, List[str]]]:
    """
    Collect unknown transform names per form.

    Returns:
        {form name: [unknown names]} (forms without problems omitted), or
        None if the file is unreadable or mixes flat keys with forms.
    """
    data = load_pipelines(path)
    if data is None:
        return None
    forms = flatten_forms(data)
    if forms is None:
        return None
    problems: Dict[str, List[str]] = {}
    for form, specs in forms.items():
        missing = sanitizer.missing_transforms(specs)
        if missing:
            problems[form] = missing
    return problems


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate transform names used by pipeline configuration files"
    )
    parser.add_argument("files", nargs="+", type=Path, help="JSON pipeline files")
    parser.add_argument("--json", action="store_true", help="Print a JSON report")
    args = parser.parse_args(argv)

    sanitizer = Sanitizer()
    report: Dict[str, Any] = {}
    exit_code = EXIT_OK

    for path in args.files:
        problems = check_file(path, sanitizer)
        if problems is None:
            report[str(path)] = {"error": "unreadable"}
            exit_code = EXIT_UNREADABLE
            if not args.json:
                print(f"[ERROR] {path}: not a readable pipelines JSON object", file=sys.stderr)
            continue
        report[str(path)] = {"unknown": problems}
        if problems:
            exit_code = max(exit_code, EXIT_UNKNOWN)
        if not args.json:
            if problems:
                for form, names in problems.items():
                    print(f"[FAIL] {path} [{form}]: unknown transforms: {', '.join(names)}")
            else:
                print(f"[OK] {path}")

    if args.json:
        print(json.dumps(report, indent=2, sort_keys=True))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
