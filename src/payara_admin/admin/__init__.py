"""Deploy request construction and execution over the __asadmin interface."""

from .executor import AdminExecutor
from .metadata import content_type, expects_output, extra_properties, last_modified, request_method
from .payload import stream_payload
from .query import QueryParam, build_deploy_query, query_length
from .request import AdminRequest, deploy_request

__all__ = [
    "AdminExecutor",
    "AdminRequest",
    "QueryParam",
    "build_deploy_query",
    "content_type",
    "deploy_request",
    "expects_output",
    "extra_properties",
    "last_modified",
    "query_length",
    "request_method",
    "stream_payload",
]
