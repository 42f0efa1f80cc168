"""Main CLI entry point for buildmeta."""
# ruff: noqa: T201

import argparse
import logging
import sys
from pathlib import Path

from buildmeta.cli.commands import info_cmd, nuspec_cmd, sonar_cmd, version_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="buildmeta",
        description="Build metadata tasks - project info, versioning and package manifests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  buildmeta info --language TSQL --project-dir src/MyDatabase
  buildmeta info --language CS --artifact dist/mylib-1.0.0-py3-none-any.whl
  buildmeta version --language CS --project-dir src/MyLib --version-part 42
  buildmeta version --language ETL --project-dir etl --release --release-version 1.1.0
  buildmeta nuspec --language TSQL --project-dir db --package-dir out --output-path bin
  buildmeta sonar --solution-dir . --project-dir src/MyLib --version 1.1.0
        """,
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file"
    )

    # Create subparsers for commands
    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        metavar="COMMAND"
    )

    info_parser = subparsers.add_parser(
        "info",
        help="Read project information",
        description="Obtain title, description, company and version for a project"
    )
    info_cmd.add_arguments(info_parser)

    version_parser = subparsers.add_parser(
        "version",
        help="Apply a version to a version info file",
        description="Rewrite version attributes for a build, release or new development cycle"
    )
    version_cmd.add_arguments(version_parser)

    nuspec_parser = subparsers.add_parser(
        "nuspec",
        help="Generate a package manifest",
        description="Generate a Nuspec file from project information"
    )
    nuspec_cmd.add_arguments(nuspec_parser)

    sonar_parser = subparsers.add_parser(
        "sonar",
        help="Apply a version to a Sonar project configuration",
        description="Set sonar.projectVersion in sonar-project.properties"
    )
    sonar_cmd.add_arguments(sonar_parser)

    return parser


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        return 1

    # Set up logging configuration
    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Route to appropriate command handler
    try:
        if parsed_args.command == "info":
            return info_cmd.execute(parsed_args)
        if parsed_args.command == "version":
            return version_cmd.execute(parsed_args)
        if parsed_args.command == "nuspec":
            return nuspec_cmd.execute(parsed_args)
        if parsed_args.command == "sonar":
            return sonar_cmd.execute(parsed_args)
        print(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
