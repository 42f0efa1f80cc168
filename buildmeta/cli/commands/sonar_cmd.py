"""Sonar command - Apply a version to a Sonar project configuration."""
# ruff: noqa: T201

import argparse
from pathlib import Path

from buildmeta.config import BuildConfig
from buildmeta.tasks.sonar_task import SonarVersioningTask


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    parser.add_argument("--solution-dir", type=Path, help="Solution directory, searched first")

    parser.add_argument("--project-dir", type=Path, help="Project directory, searched second")

    parser.add_argument("--version", required=True, help="Version to apply")


def execute(args: argparse.Namespace) -> int:
    """Execute the sonar command."""
    config = BuildConfig.load(args.config)
    project_dir = args.project_dir or config.project_dir

    task = SonarVersioningTask(
        solution_dir=args.solution_dir or config.solution_dir or project_dir,
        project_dir=project_dir,
        version=args.version,
    )

    if not task.execute():
        print("✗ Failed to apply version to Sonar project configuration")
        return 1

    print(f"✅ Applied version {args.version} to {task.output_file_path}")
    return 0
