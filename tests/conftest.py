from pathlib import Path

import pytest

from src.models import CommandError


class ScriptedRunner:
    """
    Answers git commands from a small in-memory picture of the repository.
    """

    def __init__(self, base: Path):
        self.base = base
        self.root = str(base / "assets")
        self.working_dir = Path(self.root)
        self.ignored = set()
        self.tracked = set()
        self.staged = False
        self.calls = []

    def execute(self, argv):
        argv = list(argv)
        self.calls.append(argv)
        name = argv[0]
        if name == "check-ignore":
            if argv[-1] not in self.ignored:
                raise CommandError(["git", *argv], 1)
        elif name == "ls-files":
            if argv[-1] not in self.tracked:
                raise CommandError(["git", *argv], 1)
        elif name == "diff":
            if self.staged:
                raise CommandError(["git", *argv], 1)
        elif name in ("add", "rm"):
            self.staged = True
        elif name in ("commit", "reset"):
            self.staged = False
        return []

    def commands(self, name):
        return [argv for argv in self.calls if argv[0] == name]


@pytest.fixture
def scripted_runner(tmp_path) -> ScriptedRunner:
    """A fake runner over ``<tmp_path>/assets``, which holds an empty .git directory."""
    (tmp_path / "assets" / ".git").mkdir(parents=True)
    return ScriptedRunner(tmp_path)
