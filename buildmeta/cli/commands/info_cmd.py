"""Info command - Read project information from an info file or artifact."""
# ruff: noqa: T201

import argparse
import json
from pathlib import Path

from buildmeta.config import BuildConfig
from buildmeta.core.errors import BuildMetaError
from buildmeta.core.languages import list_languages
from buildmeta.extractors import list_extractors
from buildmeta.tasks.info_task import InfoTask


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    parser.add_argument(
        "--language", "-l",
        help=f"Project language ({', '.join(list_languages())})",
    )

    parser.add_argument("--project-dir", type=Path, help="Project directory")

    parser.add_argument(
        "--info-path",
        type=Path,
        help="Info file, relative to the project directory (default: language default)",
    )

    parser.add_argument(
        "--artifact", type=Path, help="Built wheel or .dist-info directory (CS and VB)"
    )

    parser.add_argument(
        "--source",
        choices=list_extractors(),
        help="Override where information is read from",
    )

    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON output")


def execute(args: argparse.Namespace) -> int:
    """Execute the info command."""
    config = BuildConfig.load(args.config)

    task = InfoTask(
        language=args.language or config.language,
        project_dir=args.project_dir or config.project_dir,
        info_path=args.info_path,
        artifact_path=args.artifact,
        source=args.source,
    )

    try:
        obtained = task.execute()
    except BuildMetaError as e:
        print(f"✗ Info command failed: {e}")
        return 1

    if args.json:
        payload = {
            "success": obtained,
            "info_path": str(task.info_path) if task.info_path else None,
            **task.record.as_dict(),
            **task.record.extras,
        }
        print(json.dumps(payload, indent=2))
        return 0 if obtained else 1

    print(f"📄 Info path: {task.info_path}")
    for name, value in task.record.as_dict().items():
        print(f"   {name}: {value}")
    if obtained:
        print("✅ Project information obtained")
        return 0

    print("✗ Failed to obtain project information")
    return 1
