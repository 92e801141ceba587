"""Administration command models."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from payara_admin.utils.names import sanitize_name


class Command(BaseModel):
    """Base of all administration commands.

    `command` is the command name appended to the __asadmin URL.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    command: ClassVar[str] = ""


class CommandVersion(Command):
    """Server `version` command, takes no parameters."""

    command: ClassVar[str] = "version"


class CommandDeploy(Command):
    """Server `deploy` command for a packaged file or an exploded directory."""

    command: ClassVar[str] = "deploy"

    path: Optional[Path] = None
    dir_deploy: bool = False
    name: Optional[str] = None
    target: Optional[str] = None
    context_root: Optional[str] = Field(None, alias="contextRoot")
    force: Literal[True] = True
    hot_deploy: bool = Field(False, alias="hotDeploy")
    properties: Dict[str, Optional[str]] = Field(default_factory=dict)
    libraries: Dict[str, Optional[str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def derive_dir_deploy(cls, data: Any) -> Any:
        """dir_deploy always follows what path points at."""
        if isinstance(data, dict):
            data = dict(data)
            path = data.get("path")
            data["dir_deploy"] = path is not None and Path(path).is_dir()
            data.pop("dirDeploy", None)
            data.pop("force", None)
        return data

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        return sanitize_name(v)
