from __future__ import annotations

import pytest
from pydantic import ValidationError

from shortcut_release_helper.contracts.tracker import LabelDecision, Story, StoryLabelFilter


@pytest.mark.parametrize(
    ("exclude", "include", "labels", "expected"),
    [
        (set(), set(), [], LabelDecision.KEEP),
        (set(), set(), ["backend"], LabelDecision.KEEP),
        ({"backend"}, set(), ["backend"], LabelDecision.EXCLUDED),
        ({"backend"}, {"backend"}, ["backend"], LabelDecision.EXCLUDED),
        ({"wip"}, {"release"}, ["release", "wip"], LabelDecision.EXCLUDED),
        (set(), {"release"}, ["release"], LabelDecision.KEEP),
        (set(), {"release"}, ["other"], LabelDecision.NOT_INCLUDED),
        (set(), {"release"}, [], LabelDecision.NOT_INCLUDED),
        ({"wip"}, {"release"}, ["other"], LabelDecision.NOT_INCLUDED),
        ({"wip"}, set(), ["other"], LabelDecision.KEEP),
    ],
)
def test_label_filter_decision_table(
    exclude: set[str], include: set[str], labels: list[str], expected: LabelDecision
) -> None:
    label_filter = StoryLabelFilter.new(exclude, include)

    assert label_filter.decide(labels) is expected


def test_label_filter_decides_on_story_labels() -> None:
    story = Story(id=1, name="Story", labels=["backend"])

    assert StoryLabelFilter().decide(story.labels) is LabelDecision.KEEP
    assert StoryLabelFilter.new(exclude_labels=["backend"]).decide(story.labels) is LabelDecision.EXCLUDED


def test_story_is_frozen() -> None:
    story = Story(id=1, name="Story")

    with pytest.raises(ValidationError):
        story.name = "changed"  # type: ignore[misc]
