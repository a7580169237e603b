from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values are read from the environment and from a .env file in the working
    directory, if present.
    """

    # Asset store and repository locations. ASSET_REPOSITORY_PATH and relative
    # file paths are resolved against ASSET_BASE_PATH (the asset store's web root).
    ASSET_BASE_PATH: str = "."
    ASSET_REPOSITORY_PATH: str = "assets"

    # "remote" or "remote branch", e.g. "origin master". Empty disables pushing.
    PUSH_TO_AFTER_COMMITTING: str = ""
    # Push after every commit instead of once at the end of each request.
    # May push many times in a row when a folder full of files is renamed.
    PUSH_IMMEDIATELY: bool = False

    # Use the current user (X-Author-Name / X-Author-Email headers) as commit author.
    # Without a user, git falls back to the repository's default author.
    AUTOMATICALLY_DEFINE_AUTHOR: bool = True
    # Used when the user's email or name is empty. Must not be empty themselves.
    SUPPLEMENT_EMPTY_AUTHOR_EMAIL: str = "cms.user@localhost"
    SUPPLEMENT_EMPTY_AUTHOR_NAME: str = "CMS User"

    COMMIT_FILE_CREATIONS: bool = True
    COMMIT_FILE_DELETIONS: bool = True
    COMMIT_FILE_RENAMINGS: bool = True

    GIT_EXECUTABLE: str = "git"

    # Seconds during which a repeat of the last event on a path is treated as a
    # duplicate hook firing.
    DUPLICATE_EVENT_WINDOW: float = 2.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
