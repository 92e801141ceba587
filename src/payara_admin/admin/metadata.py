"""Request shape derived from the deployment mode.

Everything here is a pure function of an immutable deploy command. File
deployments are POSTed as a ZIP stream; directory deployments only pass the
server-side path, so they use the executor's default method and send no body.
"""

from __future__ import annotations

import io
from typing import Optional

from payara_admin.commands.models import CommandDeploy

DEFAULT_METHOD = "GET"
POST_METHOD = "POST"
ZIP_CONTENT_TYPE = "application/zip"

# Keys read by the server from the ZIP entry extra field.
DATA_REQUEST_TYPE = "data-request-type"
FILE_TRANSFER = "file-xfer"
LAST_MODIFIED = "last-modified"


def request_method(command: CommandDeploy) -> str:
    return DEFAULT_METHOD if command.dir_deploy else POST_METHOD


def expects_output(command: CommandDeploy) -> bool:
    """Whether the request carries a body."""
    return not command.dir_deploy


def content_type(command: CommandDeploy) -> Optional[str]:
    return None if command.dir_deploy else ZIP_CONTENT_TYPE


def last_modified(command: CommandDeploy) -> str:
    """Last modification of the deployed path in epoch milliseconds.

    Missing or unreadable paths report 0.
    """
    if command.path is None:
        return "0"
    try:
        mtime_ns = command.path.stat().st_mtime_ns
    except OSError:
        return "0"
    return str(max(0, mtime_ns // 1_000_000))


def extra_properties(command: CommandDeploy) -> bytes:
    """Properties blob attached as the ZIP entry extra field.

    The server parses it in java.util.Properties text format, ISO-8859-1.
    """
    props = {
        DATA_REQUEST_TYPE: FILE_TRANSFER,
        LAST_MODIFIED: last_modified(command),
    }
    buf = io.StringIO()
    for key, value in props.items():
        buf.write(f"{key}={value}\n")
    return buf.getvalue().encode("iso-8859-1")
