"""Administration command entities."""

from .models import Command, CommandDeploy, CommandVersion
from .loader import load_deploy_command

__all__ = [
    "Command",
    "CommandDeploy",
    "CommandVersion",
    "load_deploy_command",
]
