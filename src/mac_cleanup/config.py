"""Environment configuration for mac-cleanup."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Snapshot of the environment variables mac-cleanup reads."""

    model_config = ConfigDict(frozen=True)

    no_color: bool = Field(False, description="NO_COLOR is set")
    pyenv_virtualenv_cache: Optional[str] = Field(
        None, description="PYENV_VIRTUALENV_CACHE_PATH"
    )
    gopath: Optional[str] = Field(None, description="GOPATH")
    environ: dict[str, str] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = dict(os.environ if environ is None else environ)
        return cls(
            no_color=bool(env.get("NO_COLOR")),
            pyenv_virtualenv_cache=env.get("PYENV_VIRTUALENV_CACHE_PATH") or None,
            gopath=env.get("GOPATH") or None,
            environ=env,
        )

    def has_env(self, name: str) -> bool:
        """Whether ``name`` is set to a non-empty value."""
        return bool(self.environ.get(name))
