from __future__ import annotations

import os
from pathlib import Path

import pytest

from mcp_resume_generator.security import resolve_in_root, sanitize_path


def _inside(path: Path, root: Path) -> bool:
    return Path(os.path.abspath(path)).is_relative_to(os.path.abspath(root))


@pytest.mark.parametrize(
    "candidate",
    [
        "../../etc/passwd",
        "../../../../../../etc/shadow",
        "./../secret",
        "/etc/passwd",
        "//server/share",
        "\\\\server\\share",
        "..\\..\\windows\\system32",
        "a/../../b",
        "a/b/../../../../c",
        "a\\..\\..\\b",
        "....//....//etc",
        ".../...//x",
        "./././.",
        "~/.ssh/id_rsa",
        "..",
        "/",
    ],
)
def test_traversal_stays_inside_root(tmp_path: Path, candidate: str) -> None:
    assert _inside(resolve_in_root(candidate, tmp_path), tmp_path)


def test_parent_traversal_is_stripped(tmp_path: Path) -> None:
    assert resolve_in_root("../../etc/passwd", tmp_path) == tmp_path / "etc" / "passwd"


def test_absolute_path_is_anchored_to_root(tmp_path: Path) -> None:
    assert resolve_in_root("/etc/passwd", tmp_path) == tmp_path / "etc" / "passwd"


def test_leading_backslashes_and_dots_are_stripped() -> None:
    assert sanitize_path("..\\..\\windows") == "windows"
    assert sanitize_path("./drafts") == "drafts"
    assert sanitize_path(".hidden") == "hidden"


@pytest.mark.parametrize("candidate", [None, "", "   ", "\t\n"])
def test_blank_candidate_resolves_to_root(tmp_path: Path, candidate) -> None:
    assert sanitize_path(candidate) == ""
    assert resolve_in_root(candidate, tmp_path) == tmp_path


def test_only_dots_and_slashes_resolve_to_root(tmp_path: Path) -> None:
    assert resolve_in_root("../..//./", tmp_path) == tmp_path


def test_nested_relative_path_is_kept(tmp_path: Path) -> None:
    assert resolve_in_root("job-applications/google", tmp_path) == tmp_path / "job-applications" / "google"


def test_invalid_characters_become_underscores() -> None:
    assert sanitize_path('bad<name>:x"y|z?w*') == "bad_name__x_y_z_w_"


def test_double_dots_inside_names_are_removed() -> None:
    assert sanitize_path("report..final") == "reportfinal"


def test_leftover_empty_segments_are_collapsed() -> None:
    assert sanitize_path("a/....//b") == "a/b"


@pytest.mark.parametrize(
    "candidate",
    [
        "a/....//b",
        "a/.../b",
        "x/...",
        "report..final",
        '<a>/b:c/"d"',
        "../../etc/passwd",
        "drafts/2024",
        "..\\x\\..\\y",
    ],
)
def test_sanitize_is_idempotent(candidate: str) -> None:
    once = sanitize_path(candidate)
    assert sanitize_path(once) == once


def test_resolver_accepts_string_root() -> None:
    assert resolve_in_root("drafts", "generated-resumes") == Path("generated-resumes") / "drafts"
