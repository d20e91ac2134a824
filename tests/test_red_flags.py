"""Tests for red-flag detection (services/red_flags.py)."""

from __future__ import annotations

from datetime import timedelta

from conftest import commit
from gitgrade.domain.entities import RedFlagKind
from gitgrade.services.red_flags import detect_red_flags, is_poor_commit


def _kinds(flags) -> list[RedFlagKind]:
    return [flag.kind for flag in flags]


class TestPoorCommits:
    def test_poor_commit_rules(self) -> None:
        assert is_poor_commit(commit("fix"))
        assert is_poor_commit(commit("Update"))
        assert is_poor_commit(commit("typo"))
        assert is_poor_commit(commit("WIP: new parser"))
        assert not is_poor_commit(commit("fix typo"))
        assert not is_poor_commit(commit("Add CSV export"))

    def test_exactly_thirty_percent_does_not_fire(self, make_snapshot, now) -> None:
        commits = [commit("fix")] * 3 + [commit("Add CSV export")] * 7
        flags = detect_red_flags(make_snapshot(["README.md"], commits=commits), now)
        assert RedFlagKind.POOR_COMMITS not in _kinds(flags)

    def test_thirty_one_percent_fires(self, make_snapshot, now) -> None:
        commits = [commit("fix")] * 31 + [commit("Add CSV export")] * 69
        flags = detect_red_flags(make_snapshot(["README.md"], commits=commits), now)
        assert _kinds(flags) == [RedFlagKind.POOR_COMMITS]
        assert flags[0].description.startswith("31% of your commits")

    def test_no_commits_never_fires(self, make_snapshot, now) -> None:
        assert detect_red_flags(make_snapshot(["README.md"]), now) == ()


class TestEntryFlags:
    def test_missing_readme(self, make_snapshot, now) -> None:
        flags = detect_red_flags(make_snapshot(["src"]), now)
        assert _kinds(flags) == [RedFlagKind.MISSING_DOCS]

    def test_lowercase_readme_counts(self, make_snapshot, now) -> None:
        assert detect_red_flags(make_snapshot(["readme.txt"]), now) == ()

    def test_env_file_is_security_risk(self, make_snapshot, now) -> None:
        flags = detect_red_flags(make_snapshot(["README.md", ".env"]), now)
        assert _kinds(flags) == [RedFlagKind.SECURITY_ISSUE]

    def test_secret_named_file_is_security_risk(self, make_snapshot, now) -> None:
        flags = detect_red_flags(make_snapshot(["README.md", "deploy_key.pem"]), now)
        assert _kinds(flags) == [RedFlagKind.SECURITY_ISSUE]

    def test_example_env_is_not_flagged(self, make_snapshot, now) -> None:
        assert detect_red_flags(make_snapshot(["README.md", ".env.example"]), now) == ()

    def test_cleanup_lists_two_examples(self, make_snapshot, now) -> None:
        names = ["README.md", "temp.txt", "backup.zip", "main_copy.py"]
        flags = detect_red_flags(make_snapshot(names), now)
        assert _kinds(flags) == [RedFlagKind.UNUSED_FILES]
        assert "Found 3 files" in flags[0].description
        assert "(temp.txt, backup.zip)" in flags[0].description


class TestInactivity:
    def test_fires_after_six_months(self, make_snapshot, now) -> None:
        snap = make_snapshot(["README.md"], pushed_at=now - timedelta(days=200))
        flags = detect_red_flags(snap, now)
        assert _kinds(flags) == [RedFlagKind.INACTIVE_REPO]
        assert "No updates in 7 months" in flags[0].description

    def test_quiet_for_five_months(self, make_snapshot, now) -> None:
        snap = make_snapshot(["README.md"], pushed_at=now - timedelta(days=170))
        assert detect_red_flags(snap, now) == ()

    def test_unknown_push_date(self, make_snapshot, now) -> None:
        assert detect_red_flags(make_snapshot(["README.md"]), now) == ()


def test_flags_are_independent_and_ordered(make_snapshot, now) -> None:
    snap = make_snapshot(
        [".env", "old_notes.txt"],
        commits=[commit("wip")] * 4,
        pushed_at=now - timedelta(days=400),
    )
    assert _kinds(detect_red_flags(snap, now)) == [
        RedFlagKind.POOR_COMMITS,
        RedFlagKind.MISSING_DOCS,
        RedFlagKind.SECURITY_ISSUE,
        RedFlagKind.UNUSED_FILES,
        RedFlagKind.INACTIVE_REPO,
    ]
