"""Configuration values for the asset committer."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..models.errors import ConfigurationError


class PushTarget(BaseModel):
    """Remote (and optionally branch) to push commits to."""

    model_config = ConfigDict(frozen=True)

    remote: str
    branch: Optional[str] = None

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PushTarget"]:
        """Parse a "remote [branch]" string. Empty means pushing is disabled."""
        if not value or not value.strip():
            return None
        parts = value.split()
        if len(parts) > 2:
            raise ConfigurationError(
                f"Push target should be 'remote' or 'remote branch', got: {value!r}"
            )
        return cls(remote=parts[0], branch=parts[1] if len(parts) == 2 else None)

    def __str__(self) -> str:
        return f"{self.remote} {self.branch}" if self.branch else self.remote


class Author(BaseModel):
    """The currently authenticated user, as supplied by an author resolver."""

    name: str = ""
    email: str = ""


class CommitterConfig(BaseModel):
    """Immutable configuration for one committer instance."""

    model_config = ConfigDict(frozen=True)

    repository_path: str = "assets"
    base_path: str = "."
    push_target: Optional[PushTarget] = None
    push_immediately: bool = False
    automatically_define_author: bool = True
    supplement_empty_author_email: str = "cms.user@localhost"
    supplement_empty_author_name: str = "CMS User"
    commit_file_creations: bool = True
    commit_file_deletions: bool = True
    commit_file_renamings: bool = True
    git_executable: str = "git"

    @model_validator(mode="after")
    def check_author_fallbacks(self) -> "CommitterConfig":
        # An explicit author must never be empty, otherwise git commit would
        # treat it as a pattern to search previous commits for.
        if not self.automatically_define_author:
            return self
        if not self.supplement_empty_author_email.strip():
            raise ConfigurationError(
                "Setting SUPPLEMENT_EMPTY_AUTHOR_EMAIL should not be empty!"
            )
        if not self.supplement_empty_author_name.strip():
            raise ConfigurationError(
                "Setting SUPPLEMENT_EMPTY_AUTHOR_NAME should not be empty!"
            )
        return self

    @property
    def pushing_enabled(self) -> bool:
        return self.push_target is not None
