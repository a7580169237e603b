"""Validated reference to a git working tree."""

import os
from pathlib import Path
from typing import Union

from .errors import ConfigurationError


class RepositoryHandle:
    """One configured working tree + git index pair. Immutable once created."""

    __slots__ = ("_root",)

    def __init__(self, root: Union[str, Path]):
        root_str = os.fspath(root)
        root_path = os.path.abspath(root_str) if root_str else ""

        if not root_path or not os.path.isdir(root_path):
            raise ConfigurationError(
                f"Repository path should be an existing directory. The path is currently: {root_path!r}"
            )

        git_dir = os.path.join(root_path, ".git")
        if not os.path.isdir(git_dir):
            raise ConfigurationError(
                f"It seems that a git repository is not initialized in '{root_path}' because it "
                "doesn't contain a directory named '.git'. You can try to run 'git init' in the "
                "repository directory. You should also define a default author for the new repository."
            )

        object.__setattr__(self, "_root", root_path)

    def __setattr__(self, name, value):
        raise AttributeError("RepositoryHandle is immutable")

    @property
    def root(self) -> str:
        return self._root

    @property
    def root_path(self) -> Path:
        return Path(self._root)

    def __eq__(self, other) -> bool:
        return isinstance(other, RepositoryHandle) and other.root == self.root

    def __hash__(self) -> int:
        return hash(self._root)

    def __repr__(self) -> str:
        return f"RepositoryHandle({self._root!r})"
