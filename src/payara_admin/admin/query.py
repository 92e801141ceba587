"""Query string building for administration commands.

Deploy query grammar::

    QUERY :: "DEFAULT" '=' <path>
             '&' "force" '=' "true"
             ['&' "name" '=' <name>]
             ['&' "target" '=' <target>]
             ['&' "contextroot" '=' <contextRoot>]
             ['&' "hotDeploy" '=' "true"]
             ['&' "properties" '=' <pname> '=' <pvalue> {':' <pname> '=' <pvalue>}]
             ['&' "libraries" '=' <lname> '=' <lvalue> {':' <lname> '=' <lvalue>}]

Values are written verbatim; the server parses this exact form, so nothing is
percent-encoded.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Mapping, Optional

from payara_admin.commands.models import Command, CommandDeploy
from payara_admin.core.exceptions import IllegalCommandInstance, IllegalNullValue
from payara_admin.utils.names import sanitize_name

PARAM_SEPARATOR = "&"
PARAM_ASSIGN_VALUE = "="
ITEM_SEPARATOR = ":"


class QueryParam(str, Enum):
    """Deploy command query parameter names."""

    DEFAULT = "DEFAULT"
    FORCE = "force"
    NAME = "name"
    TARGET = "target"
    CONTEXT_ROOT = "contextroot"
    HOT_DEPLOY = "hotDeploy"
    PROPERTIES = "properties"
    LIBRARIES = "libraries"


def _bool_value(value: bool) -> str:
    return "true" if value else "false"


def _param(param: QueryParam, value: str) -> str:
    return f"{param.value}{PARAM_ASSIGN_VALUE}{value}"


def _mapping_value(items: Mapping[str, Optional[str]]) -> str:
    """Serialize mapping as k1=v1:k2=v2, bare key when value is None."""
    pairs = []
    for key, value in items.items():
        if value is None:
            pairs.append(key)
        else:
            pairs.append(f"{key}{PARAM_ASSIGN_VALUE}{value}")
    return ITEM_SEPARATOR.join(pairs)


def _deploy_params(command: Command) -> List[str]:
    if not isinstance(command, CommandDeploy):
        raise IllegalCommandInstance(
            f"Deploy query requires a deploy command, got {type(command).__name__}"
        )
    if command.path is None:
        raise IllegalNullValue("Deploy command path must not be null")

    name = sanitize_name(command.name) if command.name else None

    params = [
        _param(QueryParam.DEFAULT, str(command.path.absolute())),
        _param(QueryParam.FORCE, _bool_value(command.force)),
    ]
    if name:
        params.append(_param(QueryParam.NAME, name))
    if command.target is not None:
        params.append(_param(QueryParam.TARGET, command.target))
    if command.context_root:
        params.append(_param(QueryParam.CONTEXT_ROOT, command.context_root))
    if command.hot_deploy:
        params.append(_param(QueryParam.HOT_DEPLOY, _bool_value(True)))
    if command.properties:
        params.append(_param(QueryParam.PROPERTIES, _mapping_value(command.properties)))
    if command.libraries:
        params.append(_param(QueryParam.LIBRARIES, _mapping_value(command.libraries)))
    return params


def build_deploy_query(command: Command) -> str:
    """Build deploy query string for given command.

    Raises:
        IllegalCommandInstance: command is not a deploy command.
        IllegalNullValue: deploy command has no path.
    """
    return PARAM_SEPARATOR.join(_deploy_params(command))


def query_length(command: Command) -> int:
    """Exact length of the deploy query string, computed without joining it."""
    params = _deploy_params(command)
    return sum(len(p) for p in params) + len(PARAM_SEPARATOR) * (len(params) - 1)
