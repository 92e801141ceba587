"""Per-invocation request strategy consumed by the admin executor."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import BinaryIO, Callable, Optional

from payara_admin.admin.metadata import (
    DEFAULT_METHOD,
    content_type,
    expects_output,
    extra_properties,
    last_modified,
    request_method,
)
from payara_admin.admin.payload import stream_payload
from payara_admin.admin.query import build_deploy_query
from payara_admin.commands.models import Command

PayloadWriter = Callable[[BinaryIO], None]


@dataclass(frozen=True)
class AdminRequest:
    """Shape of a single administration request.

    payload_writer is only called when expects_output is set; it receives the
    open output sink of the request body.
    """

    query_string: str = ""
    request_method: str = DEFAULT_METHOD
    content_type: Optional[str] = None
    expects_output: bool = False
    last_modified: Optional[str] = None
    payload_writer: Optional[PayloadWriter] = None


def deploy_request(
    command: Command,
    *,
    extra_metadata: Optional[bytes] = None,
    logger=None,
) -> AdminRequest:
    """Build the request strategy for a deploy command.

    The query is built first, so a wrong command kind or a missing path fails
    before anything touches the network.
    """
    query = build_deploy_query(command)
    writer = None
    if expects_output(command):
        blob = extra_metadata if extra_metadata is not None else extra_properties(command)
        writer = partial(stream_payload, command=command, extra_metadata=blob, logger=logger)
    return AdminRequest(
        query_string=query,
        request_method=request_method(command),
        content_type=content_type(command),
        expects_output=expects_output(command),
        last_modified=last_modified(command),
        payload_writer=writer,
    )
