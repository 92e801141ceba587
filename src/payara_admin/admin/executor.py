"""Generic HTTP executor for __asadmin administration commands."""

from __future__ import annotations

import tempfile
from typing import Optional

import httpx
import structlog
from prometheus_client import Counter

from payara_admin.admin.payload import BUFFER_SIZE
from payara_admin.admin.request import AdminRequest, deploy_request
from payara_admin.commands.models import Command, CommandDeploy, CommandVersion
from payara_admin.core.config import Settings
from payara_admin.core.exceptions import AdminRequestError

# Prometheus metrics
ADMIN_REQUESTS = Counter(
    "payara_admin_requests_total",
    "Total administration requests",
    ["command", "method", "outcome"],
)

PAYLOAD_BYTES = Counter(
    "payara_admin_payload_bytes_total",
    "Request body bytes sent to the administration interface",
    ["command"],
)


class AdminExecutor:
    """Runs administration requests on a synchronous httpx client.

    The executor knows nothing about individual commands: each invocation
    hands it an AdminRequest describing query, method, content type and body.
    Responses are returned as received.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.Client] = None,
        logger=None,
    ):
        self.settings = settings or Settings()
        self.logger = logger if logger is not None else structlog.get_logger()
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=httpx.Timeout(
                self.settings.request_timeout_seconds,
                connect=self.settings.connect_timeout_seconds,
            ),
        )

    def __enter__(self) -> "AdminExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def url(self, command_name: str, request: AdminRequest) -> str:
        url = self.settings.admin_url(command_name)
        if request.query_string:
            url = f"{url}?{request.query_string}"
        return url

    def headers(self, request: AdminRequest) -> dict:
        headers = {
            "User-Agent": self.settings.user_agent,
            "Accept": "*/*",
        }
        if request.content_type:
            headers["Content-Type"] = request.content_type
        return headers

    def execute(self, command_name: str, request: AdminRequest) -> httpx.Response:
        """Send one administration request and return the raw response.

        Raises:
            AdminRequestError: the HTTP exchange failed.
            OSError: writing the request body failed.
        """
        url = self.url(command_name, request)
        headers = self.headers(request)
        spool = None
        try:
            content = None
            if request.expects_output:
                spool = tempfile.SpooledTemporaryFile(max_size=self.settings.spool_max_memory_bytes)
                if request.payload_writer is not None:
                    request.payload_writer(spool)
                size = spool.tell()
                spool.seek(0)
                headers["Content-Length"] = str(size)
                content = iter(lambda: spool.read(BUFFER_SIZE), b"") if size else b""
                PAYLOAD_BYTES.labels(command=command_name).inc(size)
                self.logger.info(
                    "Sending administration request",
                    command=command_name,
                    method=request.request_method,
                    bytes=size,
                    last_modified=request.last_modified,
                )
            else:
                self.logger.info(
                    "Sending administration request",
                    command=command_name,
                    method=request.request_method,
                )

            try:
                response = self.client.request(
                    request.request_method, url, headers=headers, content=content
                )
            except httpx.HTTPError as e:
                ADMIN_REQUESTS.labels(
                    command=command_name, method=request.request_method, outcome="error"
                ).inc()
                self.logger.warning(
                    "Administration request failed", command=command_name, error=str(e)
                )
                raise AdminRequestError(f"{command_name} request failed: {e}") from e
        finally:
            if spool is not None:
                spool.close()

        ADMIN_REQUESTS.labels(
            command=command_name, method=request.request_method, outcome=str(response.status_code)
        ).inc()
        self.logger.info(
            "Administration response received", command=command_name, status=response.status_code
        )
        return response

    def run(self, command: Command, request: Optional[AdminRequest] = None) -> httpx.Response:
        return self.execute(command.command, request or AdminRequest())

    def deploy(self, command: CommandDeploy, *, extra_metadata: Optional[bytes] = None) -> httpx.Response:
        """Deploy a file or directory described by command."""
        request = deploy_request(command, extra_metadata=extra_metadata, logger=self.logger)
        return self.run(command, request)

    def version(self) -> httpx.Response:
        return self.run(CommandVersion())
