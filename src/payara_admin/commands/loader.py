"""Loading deploy commands from YAML descriptor files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import structlog
import yaml
from pydantic import ValidationError

from payara_admin.commands.models import CommandDeploy
from payara_admin.core.exceptions import ConfigurationError

logger = structlog.get_logger()


def _optional_str(value: Any):
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _string_mapping(raw: Any, field: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"'{field}' must be a mapping")
    return {str(k): _optional_str(v) for k, v in raw.items()}


def load_deploy_command(descriptor: Union[str, Path]) -> CommandDeploy:
    """Read a deploy descriptor such as::

        path: build/app.war
        name: app
        contextRoot: /app
        hotDeploy: true
        properties:
          keepSessions: "true"

    A relative path is resolved against the descriptor's directory.
    """
    descriptor = Path(descriptor)
    try:
        data = yaml.safe_load(descriptor.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read deploy descriptor {descriptor}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Deploy descriptor {descriptor} must contain a mapping")
    if not data.get("path"):
        raise ConfigurationError(f"Deploy descriptor {descriptor} has no 'path'")

    path = Path(str(data["path"]))
    if not path.is_absolute():
        path = descriptor.parent / path

    fields = {
        "path": path,
        "name": _optional_str(data.get("name")),
        "target": _optional_str(data.get("target")),
        "contextRoot": _optional_str(data.get("contextRoot")),
        "hotDeploy": bool(data.get("hotDeploy", False)),
        "properties": _string_mapping(data.get("properties"), "properties"),
        "libraries": _string_mapping(data.get("libraries"), "libraries"),
    }
    try:
        command = CommandDeploy(**fields)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid deploy descriptor {descriptor}: {e}") from e

    logger.debug("Loaded deploy descriptor", descriptor=str(descriptor), path=str(path))
    return command
