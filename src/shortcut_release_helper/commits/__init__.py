"""Commit message parsing."""

from shortcut_release_helper.commits.parser import STORY_REFERENCE_PATTERN, extract_story_ids, parse_commits

__all__ = ["STORY_REFERENCE_PATTERN", "extract_story_ids", "parse_commits"]
