"""Command line interface for buildmeta.

Each build task is exposed as a subcommand so build scripts can call the
tasks without writing Python. The entry point is ``buildmeta.cli.main:main``.
"""
