import subprocess
from pathlib import Path
from typing import Callable, List

import pytest

from src.schemas import CommitterConfig
from src.services import AssetCommitter, create_asset_committer


class GitRepo:
    """A throwaway git repository inside an asset store web root."""

    def __init__(self, base: Path):
        self.base = base
        self.root = base / "assets"
        self.root.mkdir()
        self.git("init", "-q")
        self.git("config", "user.email", "default@example.com")
        self.git("config", "user.name", "Default Author")
        self.git("config", "commit.gpgsign", "false")
        self.write(".gitignore", "*.log\nprivate/\n")
        self.git("add", ".gitignore")
        self.git("commit", "-q", "-m", "Initial commit")
        self.branch = self.git("symbolic-ref", "--short", "HEAD")[0]

    def git(self, *args: str, cwd: Path = None) -> List[str]:
        result = subprocess.run(
            ["git", *args],
            cwd=str(cwd or self.root),
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.splitlines()

    def path(self, relative: str) -> str:
        return str(self.root / relative)

    def write(self, relative: str, content: str = "content") -> str:
        target = self.root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        return str(target)

    def move(self, old: str, new: str) -> None:
        target = self.root / new
        target.parent.mkdir(parents=True, exist_ok=True)
        (self.root / old).rename(target)

    def delete(self, relative: str) -> None:
        (self.root / relative).unlink()

    def commit_count(self) -> int:
        return int(self.git("rev-list", "--count", "HEAD")[0])

    def last_message(self) -> str:
        return "\n".join(self.git("log", "-1", "--format=%B")).strip()

    def last_author(self) -> str:
        return self.git("log", "-1", "--format=%an <%ae>")[0]

    def is_tracked(self, relative: str) -> bool:
        return bool(self.git("ls-files", "--", relative))

    def staged_files(self) -> List[str]:
        return self.git("diff", "--cached", "--name-only")

@pytest.fixture
def git_repo(tmp_path) -> GitRepo:
    return GitRepo(tmp_path)

@pytest.fixture
def make_committer(git_repo) -> Callable[..., AssetCommitter]:
    def _make(author_resolver=None, **config) -> AssetCommitter:
        config.setdefault("base_path", str(git_repo.base))
        config.setdefault("repository_path", "assets")
        return create_asset_committer(
            CommitterConfig(**config), author_resolver=author_resolver
        )

    return _make
