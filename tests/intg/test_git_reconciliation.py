"""Integration tests against a real git repository."""

import shutil

import pytest

from src.models import CommandError, NothingToCommitError
from src.schemas import Author, PushTarget

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class TestFileCreation:
    def test_create_commits_file(self, git_repo, make_committer):
        git_repo.write("a.txt")
        committer = make_committer()
        before = git_repo.commit_count()

        assert committer.on_file_created("assets/a.txt") is True

        assert git_repo.commit_count() == before + 1
        assert git_repo.last_message() == "Create file a.txt."
        assert git_repo.is_tracked("a.txt")
        assert committer.state.is_tracked(git_repo.path("a.txt")) is True
        assert committer.has_pending_commits() is True

    @pytest.mark.parametrize("relative", ["debug.log", "private/secret.txt"])
    def test_create_ignored_file(self, git_repo, make_committer, relative):
        git_repo.write(relative)
        committer = make_committer()
        before = git_repo.commit_count()

        assert committer.on_file_created(git_repo.path(relative)) is False

        assert git_repo.commit_count() == before
        assert not git_repo.is_tracked(relative)
        assert committer.has_pending_commits() is False

    def test_commit_contains_only_the_event_file(self, git_repo, make_committer):
        """Test that leftovers in the index are unstaged, not committed or deleted."""
        git_repo.write("stray.txt", "stray content")
        git_repo.git("add", "stray.txt")
        git_repo.write("a.txt")

        make_committer().on_file_created(git_repo.path("a.txt"))

        committed = git_repo.git("show", "--name-only", "--format=", "HEAD")
        assert [name for name in committed if name] == ["a.txt"]
        assert (git_repo.root / "stray.txt").read_text() == "stray content"
        assert not git_repo.is_tracked("stray.txt")
        assert git_repo.staged_files() == []

    def test_recreating_unchanged_file_has_nothing_to_commit(
        self, git_repo, make_committer
    ):
        git_repo.write("a.txt")
        committer = make_committer()
        committer.on_file_created(git_repo.path("a.txt"))

        with pytest.raises(NothingToCommitError):
            committer.on_file_created(git_repo.path("a.txt"))

        assert committer.commit_count == 1

    def test_author_from_current_user(self, git_repo, make_committer):
        git_repo.write("a.txt")
        committer = make_committer(
            author_resolver=lambda: Author(name="Jane Doe", email="jane@example.com")
        )

        committer.on_file_created(git_repo.path("a.txt"))

        assert git_repo.last_author() == "Jane Doe <jane@example.com>"

    def test_author_fallback_email(self, git_repo, make_committer):
        git_repo.write("a.txt")
        committer = make_committer(author_resolver=lambda: Author(name="Jane Doe"))

        committer.on_file_created(git_repo.path("a.txt"))

        assert git_repo.last_author() == "Jane Doe <cms.user@localhost>"

    def test_default_author_without_user(self, git_repo, make_committer):
        git_repo.write("a.txt")

        make_committer(author_resolver=lambda: None).on_file_created(
            git_repo.path("a.txt")
        )

        assert git_repo.last_author() == "Default Author <default@example.com>"


class TestFileDeletion:
    def test_delete_tracked_file(self, git_repo, make_committer):
        git_repo.write("a.txt")
        committer = make_committer()
        committer.on_file_created(git_repo.path("a.txt"))
        git_repo.delete("a.txt")
        before = git_repo.commit_count()

        assert committer.on_file_deleted(git_repo.path("a.txt")) is True

        assert git_repo.commit_count() == before + 1
        assert git_repo.last_message() == "Delete file a.txt."
        assert not git_repo.is_tracked("a.txt")

    def test_delete_untracked_file(self, git_repo, make_committer):
        before = git_repo.commit_count()

        assert make_committer().on_file_deleted(git_repo.path("never.txt")) is False

        assert git_repo.commit_count() == before


class TestFileRenaming:
    def _commit(self, git_repo, committer, relative):
        git_repo.write(relative)
        committer.on_file_created(git_repo.path(relative))

    def test_move_to_subdirectory(self, git_repo, make_committer):
        committer = make_committer()
        self._commit(git_repo, committer, "a.txt")
        git_repo.move("a.txt", "sub/a.txt")
        before = git_repo.commit_count()

        committer.on_file_renamed(git_repo.path("a.txt"), git_repo.path("sub/a.txt"))

        assert git_repo.commit_count() == before + 1
        assert git_repo.last_message().startswith("Move file a.txt to sub/a.txt.")
        assert not git_repo.is_tracked("a.txt")
        assert git_repo.is_tracked("sub/a.txt")

    def test_rename_in_same_directory(self, git_repo, make_committer):
        committer = make_committer()
        self._commit(git_repo, committer, "a.txt")
        git_repo.move("a.txt", "b.txt")

        committer.on_file_renamed(git_repo.path("a.txt"), git_repo.path("b.txt"))

        assert git_repo.last_message() == "Rename file a.txt to b.txt."

    def test_rename_there_and_back(self, git_repo, make_committer):
        committer = make_committer()
        self._commit(git_repo, committer, "a.txt")

        git_repo.move("a.txt", "b.txt")
        committer.on_file_renamed(git_repo.path("a.txt"), git_repo.path("b.txt"))
        git_repo.move("b.txt", "a.txt")
        committer.on_file_renamed(git_repo.path("b.txt"), git_repo.path("a.txt"))

        assert git_repo.is_tracked("a.txt")
        assert not git_repo.is_tracked("b.txt")

    def test_rename_from_ignored_name(self, git_repo, make_committer):
        git_repo.write("notes.log")
        git_repo.move("notes.log", "notes.txt")

        make_committer().on_file_renamed(
            git_repo.path("notes.log"), git_repo.path("notes.txt")
        )

        message = git_repo.last_message()
        assert message.startswith("Rename file notes.log to notes.txt.")
        assert "appears as a new file" in message
        assert "not previously committed" not in message
        assert git_repo.is_tracked("notes.txt")

    def test_rename_of_uncommitted_file(self, git_repo, make_committer):
        git_repo.write("draft.txt")
        git_repo.move("draft.txt", "final.txt")

        make_committer().on_file_renamed(
            git_repo.path("draft.txt"), git_repo.path("final.txt")
        )

        assert "was not previously committed" in git_repo.last_message()
        assert git_repo.is_tracked("final.txt")

    def test_rename_to_ignored_name_commits_deletion(self, git_repo, make_committer):
        committer = make_committer()
        self._commit(git_repo, committer, "report.txt")
        git_repo.move("report.txt", "report.log")

        committer.on_file_renamed(
            git_repo.path("report.txt"), git_repo.path("report.log")
        )

        assert "only a deletion is committed" in git_repo.last_message()
        assert not git_repo.is_tracked("report.txt")
        assert not git_repo.is_tracked("report.log")

    def test_untracked_to_ignored_is_noop(self, git_repo, make_committer):
        git_repo.write("draft.txt")
        git_repo.move("draft.txt", "draft.log")
        before = git_repo.commit_count()

        result = make_committer().on_file_renamed(
            git_repo.path("draft.txt"), git_repo.path("draft.log")
        )

        assert result is False
        assert git_repo.commit_count() == before


class TestPushing:
    @pytest.fixture
    def remote(self, git_repo):
        remote = git_repo.base / "remote.git"
        git_repo.git("init", "--bare", "-q", str(remote), cwd=git_repo.base)
        git_repo.git("remote", "add", "origin", str(remote))
        return remote

    def _remote_head(self, git_repo, remote):
        return git_repo.git("--git-dir", str(remote), "rev-parse", git_repo.branch)[0]

    def test_immediate_push(self, git_repo, make_committer, remote):
        committer = make_committer(
            push_target=PushTarget(remote="origin", branch=git_repo.branch),
            push_immediately=True,
        )
        git_repo.write("a.txt")

        committer.on_file_created(git_repo.path("a.txt"))

        assert self._remote_head(git_repo, remote) == git_repo.git("rev-parse", "HEAD")[0]

    def test_deferred_batch_push(self, git_repo, make_committer, remote):
        committer = make_committer(
            push_target=PushTarget(remote="origin", branch=git_repo.branch)
        )
        git_repo.write("a.txt")
        git_repo.write("b.txt")
        committer.on_file_created(git_repo.path("a.txt"))
        committer.on_file_created(git_repo.path("b.txt"))

        assert committer.push_if_pending() is True

        assert self._remote_head(git_repo, remote) == git_repo.git("rev-parse", "HEAD")[0]
        assert committer.has_pending_commits() is True

    def test_failed_push_keeps_local_commit(self, git_repo, make_committer):
        committer = make_committer(
            push_target=PushTarget(remote="nowhere"), push_immediately=True
        )
        git_repo.write("a.txt")
        before = git_repo.commit_count()

        with pytest.raises(CommandError):
            committer.on_file_created(git_repo.path("a.txt"))

        assert git_repo.commit_count() == before + 1
        assert committer.has_pending_commits() is True
