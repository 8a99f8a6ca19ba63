"""CLI parser construction."""

from __future__ import annotations

import argparse

from shortcut_release_helper.config import DEFAULT_CONFIG_PATH
from shortcut_release_helper.renderers import RENDERERS


def _story_id(value: str) -> int:
    candidate = value.strip().lower().removeprefix("sc-")
    if not candidate.isdigit():
        raise argparse.ArgumentTypeError(f"invalid story id: {value!r}")
    return int(candidate)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortcut-release-helper",
        description="Generate release notes from the Shortcut stories referenced by unreleased commits.",
    )
    parser.add_argument("output_file", help="Output file for the release notes")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to config.toml")
    parser.add_argument("--version", default=None, help="Version to release")
    parser.add_argument("--name", default=None, help="Name of the release")
    parser.add_argument("--description", default=None, help="Description of the release")
    parser.add_argument(
        "--exclude-story-id",
        type=_story_id,
        action="append",
        default=[],
        help="Id of story to exclude, can be used multiple times",
    )
    parser.add_argument(
        "--exclude-story-label",
        action="append",
        default=[],
        help=(
            "Label of story to exclude, can be used multiple times - has priority over "
            "--include-story-label if a story carries both"
        ),
    )
    parser.add_argument(
        "--include-story-label",
        action="append",
        default=[],
        help="Label of story to include, can be used multiple times",
    )
    parser.add_argument("--exclude-unparsed-commits", action="store_true", help="Exclude unparsed commits")
    parser.add_argument(
        "--format",
        choices=sorted(RENDERERS),
        default=None,
        help="Output format (default: the config renderer, or template when template_file is set)",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file (default: nearest .env)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
