"""File identity: the absolute path of one file in the asset store."""

import os
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from .errors import InvalidArgumentError


class FileIdentity(BaseModel):
    """An absolute, normalized path to a single file (never a directory)."""

    model_config = ConfigDict(frozen=True)

    path: str

    def __str__(self) -> str:
        return self.path

    @property
    def parent(self) -> str:
        return os.path.dirname(self.path)

    def relative_to(self, root: Union[str, Path]) -> str:
        """Path relative to ``root`` with forward slashes, or the absolute path
        if the file lives outside ``root``."""
        root = os.path.abspath(str(root))
        if self.path == root or not self.path.startswith(root.rstrip(os.sep) + os.sep):
            return self.path
        return Path(os.path.relpath(self.path, root)).as_posix()

    @classmethod
    def from_value(cls, value: Any, base_path: Union[str, Path] = ".") -> "FileIdentity":
        """
        Build a FileIdentity from a path string, a PathLike, another identity
        or any object exposing a ``filename`` attribute (e.g. a CMS file record).

        Relative paths are resolved against ``base_path``.
        """
        if isinstance(value, FileIdentity):
            return value

        if isinstance(value, (str, os.PathLike)):
            raw = os.fspath(value)
        elif isinstance(getattr(value, "filename", None), str):
            raw = value.filename
        else:
            raise InvalidArgumentError(
                "Expected a path string or a file record with a 'filename' "
                f"attribute, got {type(value).__name__}"
            )

        if not isinstance(raw, str):
            raise InvalidArgumentError(f"File path must be text, got {type(raw).__name__}")
        if not raw.strip():
            raise InvalidArgumentError("File path must not be empty")

        absolute = os.path.abspath(os.path.join(os.fspath(base_path), raw))
        if os.path.isdir(absolute):
            # Folder management is not supported, callers send one event per file.
            raise InvalidArgumentError(
                f"'{absolute}' is a directory; only single files can be committed"
            )
        return cls(path=absolute)
