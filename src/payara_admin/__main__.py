"""CLI entrypoint: payara-deploy deploy|version."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

import structlog
from pydantic import ValidationError

from payara_admin.admin.executor import AdminExecutor
from payara_admin.admin.request import deploy_request
from payara_admin.commands.loader import load_deploy_command
from payara_admin.commands.models import CommandDeploy
from payara_admin.core.config import Settings
from payara_admin.core.exceptions import ConfigurationError, PayaraAdminError
from payara_admin.utils.logging import bind_deploy_context, setup_logging

logger = structlog.get_logger()


def _key_values(items: Optional[List[str]], option: str) -> Dict[str, Optional[str]]:
    """Parse repeated K=V options, a bare K maps to None."""
    result: Dict[str, Optional[str]] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not key:
            raise ConfigurationError(f"{option} expects KEY=VALUE, got: {item}")
        result[key] = value if sep else None
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payara-deploy", description="Deploy applications through the Payara admin interface"
    )
    parser.add_argument("--host", help="Administration host (PAYARA_HOST)")
    parser.add_argument("--port", type=int, help="Administration port (PAYARA_ADMIN_PORT)")
    parser.add_argument("--secure", action="store_true", default=None, help="Use HTTPS")
    sub = parser.add_subparsers(dest="cmd")

    cmd_deploy = sub.add_parser("deploy", help="Deploy a file or exploded directory")
    cmd_deploy.add_argument("path", nargs="?", help="Archive file or directory to deploy")
    cmd_deploy.add_argument("--descriptor", help="YAML deploy descriptor")
    cmd_deploy.add_argument("--name", help="Application name")
    cmd_deploy.add_argument("--target", help="Deployment target")
    cmd_deploy.add_argument("--context-root", help="Web context root")
    cmd_deploy.add_argument("--hot-deploy", action="store_true", help="Hot deploy")
    cmd_deploy.add_argument("--property", action="append", metavar="K=V", help="Deployment property")
    cmd_deploy.add_argument("--library", action="append", metavar="K=V", help="Library reference")
    cmd_deploy.add_argument(
        "--dry-run", action="store_true", help="Print the request without contacting the server"
    )

    sub.add_parser("version", help="Query the server version")
    return parser


def _settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["admin_port"] = args.port
    if args.secure:
        overrides["secure"] = True
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def _deploy_command(args: argparse.Namespace) -> CommandDeploy:
    if args.descriptor:
        return load_deploy_command(args.descriptor)
    if not args.path:
        raise ConfigurationError("deploy requires PATH or --descriptor")
    return CommandDeploy(
        path=Path(args.path),
        name=args.name,
        target=args.target,
        context_root=args.context_root,
        hot_deploy=args.hot_deploy,
        properties=_key_values(args.property, "--property"),
        libraries=_key_values(args.library, "--library"),
    )


def _run(args: argparse.Namespace) -> int:
    settings = _settings(args)
    setup_logging(settings.log_level, settings.log_format)

    if args.cmd == "deploy":
        command = _deploy_command(args)
        bind_deploy_context(command.target, command.name)
        if args.dry_run:
            request = deploy_request(command)
            print(request.request_method, request.content_type or "-")
            print(f"{settings.admin_url(command.command)}?{request.query_string}")
            return 0
        with AdminExecutor(settings) as executor:
            response = executor.deploy(command)
    else:
        with AdminExecutor(settings) as executor:
            response = executor.version()

    print(response.text)
    if response.status_code >= 400:
        logger.error("Administration command rejected", status=response.status_code)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cmd is None:
        parser.print_help()
        return 1
    try:
        return _run(args)
    except PayaraAdminError as e:
        logger.error("Command failed", error=str(e), code=e.code)
        return 1
    except OSError as e:
        logger.error("Payload transfer failed", error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
