"""
Load Report

Records how a ResolvedConfig was assembled: which file was located, whether
it decoded, and what the environment overlay contributed. Load errors that
do not abort construction are surfaced here.
"""

from pydantic import BaseModel, Field


class LoadReport(BaseModel):
    """
    Outcome of resolving one configuration.

    Attributes:
        file_path: Absolute path of the located file
        file_format: Decoder used ("toml", "json", "yaml", "ini")
        file_loaded: Whether the file decoded successfully
        errors: Non-fatal load errors, in the order they occurred
        env_keys: Number of environment keys merged over the file tree
        skipped_env_keys: Environment entries that could not be represented
        dotenv_path: .env file layered beneath the process environment
    """

    file_path: str | None = None
    file_format: str | None = None
    file_loaded: bool = False
    errors: list[str] = Field(default_factory=list)
    env_keys: int = 0
    skipped_env_keys: list[str] = Field(default_factory=list)
    dotenv_path: str | None = None

    @property
    def ok(self) -> bool:
        """True when nothing went wrong during loading."""
        return not self.errors
