import pytest

from content_slots.exceptions import ConfigurationError
from content_slots.shared.matching import match_paths

PATHS = ["index.md", "docs/guide.md", "docs/deep/api.md", "page.html", "page.njk", "notes.markdown"]


def test_double_star_matches_any_depth_including_root() -> None:
    assert match_paths("**/*.md", PATHS) == ["index.md", "docs/guide.md", "docs/deep/api.md"]


def test_single_star_does_not_cross_directories() -> None:
    assert match_paths("*.md", PATHS) == ["index.md"]
    assert match_paths("docs/*.md", PATHS) == ["docs/guide.md"]
    assert match_paths("docs/**", PATHS) == ["docs/guide.md", "docs/deep/api.md"]


def test_braces_question_mark_and_classes() -> None:
    assert match_paths("**/*.{njk,html}", PATHS) == ["page.html", "page.njk"]
    assert match_paths("page.?jk", PATHS) == ["page.njk"]
    assert match_paths("[!p]*.md", PATHS) == ["index.md"]


def test_backslash_paths_are_normalized() -> None:
    assert match_paths("docs/*.md", ["docs\\guide.md"]) == ["docs\\guide.md"]


def test_unclosed_brace_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        match_paths("**/*.{md", PATHS)
