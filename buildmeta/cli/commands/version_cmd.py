"""Version command - Apply a version to a version info file."""
# ruff: noqa: T201

import argparse
import json
from pathlib import Path

from buildmeta.config import BuildConfig
from buildmeta.core.languages import list_languages
from buildmeta.tasks.versioning_task import VersioningTask


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    parser.add_argument(
        "--language", "-l",
        help=f"Project language ({', '.join(list_languages())})",
    )

    parser.add_argument("--project-dir", type=Path, help="Project directory")

    parser.add_argument(
        "--version-info-path",
        type=Path,
        help="Version info file, relative to the project directory (default: language default)",
    )

    parser.add_argument("--version-part", help="Value substituted for the '*' placeholder")

    parser.add_argument("--release", action="store_true", help="Produce a release version")

    parser.add_argument("--release-version", help="Explicit release version (with --release)")

    parser.add_argument(
        "--new-development-version",
        help="Switch the version info file to this new development version",
    )

    parser.add_argument(
        "--dry-run", action="store_true", help="Resolve versions without writing the file"
    )

    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON output")


def execute(args: argparse.Namespace) -> int:
    """Execute the version command."""
    config = BuildConfig.load(args.config)

    task = VersioningTask(
        project_dir=args.project_dir or config.project_dir,
        language=args.language or config.language,
        version_part=args.version_part or config.version_part,
        version_info_path=args.version_info_path,
        is_release=args.release,
        release_version=args.release_version,
        is_new_development_version=bool(args.new_development_version),
        new_development_version=args.new_development_version,
        dry_run=args.dry_run,
    )
    applied = task.execute()

    if args.json:
        payload = {
            "success": applied,
            "version_info_path": str(task.output_file_path) if task.output_file_path else None,
            "version": task.version,
            "is_semantic_version": task.is_semantic_version,
            "next_release_version": task.next_release_version,
            "next_new_development_version": task.next_new_development_version,
        }
        print(json.dumps(payload, indent=2))
        return 0 if applied else 1

    if not applied:
        print(f"✗ Failed to apply version to {task.output_file_path}")
        return 1

    print(f"🏷️  Version: {task.version}")
    print(f"   Semantic: {task.is_semantic_version}")
    print(f"   Next release version: {task.next_release_version}")
    print(f"   Next development version: {task.next_new_development_version}")
    if args.dry_run:
        print(f"✨ Dry run, {task.output_file_path} left unchanged")
    else:
        print(f"✅ Applied version to {task.output_file_path}")
    return 0
