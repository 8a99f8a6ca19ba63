"""Command-line interface for shortcut-release-helper."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from shortcut_release_helper import ReleaseHelper as ReleaseHelper
from shortcut_release_helper import load_config as load_config
from shortcut_release_helper.auth import load_env_file as load_env_file
from shortcut_release_helper.cli.app import main as main
from shortcut_release_helper.cli.commands import generate as generate_command
from shortcut_release_helper.cli.parser import build_parser as build_parser
from shortcut_release_helper.renderers import write_release as write_release

_format_summary = generate_command.format_release_summary
_run_generate = generate_command.run_generate
