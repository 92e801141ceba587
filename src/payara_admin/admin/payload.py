"""Streaming of a deployed file as a single-entry ZIP archive.

The administration interface expects uploaded files inside a ZIP stream, one
entry per file, with the upload metadata in the entry extra field.
"""

from __future__ import annotations

import time
import zipfile
from typing import BinaryIO, Optional

import structlog

from payara_admin.admin.metadata import POST_METHOD, request_method
from payara_admin.commands.models import CommandDeploy

BUFFER_SIZE = 1024 * 1024
MAX_EXTRA_SIZE = 0xFFFF


def open_source(command: CommandDeploy, *, logger=None) -> Optional[BinaryIO]:
    """Open the deployed file for reading.

    Returns None for directory deployments and for files that cannot be
    opened, such as missing or unreadable files.
    """
    log = logger if logger is not None else structlog.get_logger()
    if command.dir_deploy or command.path is None:
        return None
    try:
        return open(command.path, "rb")
    except OSError as e:
        log.info("Deployed file not found", path=str(command.path), error=str(e))
        return None


def _entry_info(entry_name: str, size: int, extra_metadata: bytes) -> zipfile.ZipInfo:
    if len(extra_metadata) > MAX_EXTRA_SIZE:
        raise ValueError(f"Extra metadata exceeds {MAX_EXTRA_SIZE} bytes: {len(extra_metadata)}")
    info = zipfile.ZipInfo(entry_name, date_time=time.localtime()[:6])
    info.compress_type = zipfile.ZIP_DEFLATED
    info.extra = extra_metadata
    # Size hint only, lets zipfile decide on ZIP64 headers up front
    info.file_size = size
    return info


def _close_quietly(resource, log, stream: str) -> None:
    try:
        resource.close()
    except (OSError, ValueError) as e:
        log.info("Error closing stream", stream=stream, error=str(e))


def stream_payload(
    output_sink: BinaryIO,
    command: CommandDeploy,
    extra_metadata: bytes,
    *,
    logger=None,
) -> None:
    """Write the deployed file into output_sink as a single-entry ZIP archive.

    A missing source file is logged and nothing is written. Errors while
    copying or finalizing the entry propagate; errors while closing the
    source or the archive are logged and suppressed.
    """
    log = logger if logger is not None else structlog.get_logger()
    source = open_source(command, logger=log)
    if source is None:
        if request_method(command) == POST_METHOD:
            log.info("No data to send", path=str(command.path))
        return

    archive = None
    try:
        info = _entry_info(command.path.name, command.path.stat().st_size, extra_metadata)
        archive = zipfile.ZipFile(output_sink, mode="w", compression=zipfile.ZIP_DEFLATED)
        entry = archive.open(info, mode="w")
        copied = 0
        while True:
            chunk = source.read(BUFFER_SIZE)
            if not chunk:
                break
            entry.write(chunk)
            copied += len(chunk)
        entry.close()
        log.debug("Payload entry written", entry=info.filename, bytes=copied)
    finally:
        _close_quietly(source, log, "source")
        if archive is not None:
            _close_quietly(archive, log, "archive")
    output_sink.flush()
