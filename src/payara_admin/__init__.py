"""Payara Admin Client - deploy artifacts through the __asadmin HTTP interface."""

__version__ = "0.1.0"
__author__ = "Payara Tools Team"

from payara_admin.commands.models import CommandDeploy
from payara_admin.core.config import Settings

__all__ = ["Settings", "CommandDeploy", "__version__"]
