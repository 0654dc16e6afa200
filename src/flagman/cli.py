"""Command-line entry point.

Usage::

    export FLAGMAN_TOKEN=glpat-...
    flagman --gitlab-project-id 123 --flags-file feature_flags.yaml
    flagman --gitlab-project-id 123 --dry-run --verbose

Exit codes: 0 success, 1 sync or desired-state failure, 2 configuration
error, 130 interrupted.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from flagman import __version__
from flagman.application.feature_flags import load_desired_flags
from flagman.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsFactory,
    SettingsLoader,
    SyncSettings,
)
from flagman.config.settings.sync import DEFAULT_BASE_URL, DEFAULT_FLAGS_FILE
from flagman.kernel.errors import DesiredStateError, SyncError
from flagman.observability.logging import configure_logging, get_logger
from flagman.service import synchronize

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flagman",
        description="Synchronize GitLab feature flags with a YAML definition file.",
        epilog="Every option can also be set through FLAGMAN_* environment variables.",
    )
    parser.add_argument("--flags-file", help=f"path to the feature flags file (default: {DEFAULT_FLAGS_FILE})")
    parser.add_argument("--gitlab-base", dest="base_url", help=f"GitLab API base URL (default: {DEFAULT_BASE_URL})")
    parser.add_argument("--gitlab-token", dest="token", help="GitLab access token (FLAGMAN_TOKEN)")
    parser.add_argument("--gitlab-project-id", dest="project_id", help="GitLab project ID (FLAGMAN_PROJECT_ID)")
    parser.add_argument(
        "--gitlab-request-timeout",
        dest="request_timeout",
        type=float,
        help="seconds to wait for a GitLab response (default: 10)",
    )
    parser.add_argument("--page-size", type=int, help="flags requested per page (default: 100)")
    parser.add_argument(
        "--concurrency",
        type=int,
        help="maximum simultaneous requests per stage (default: 5)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="show what would change without applying it",
    )
    parser.add_argument("--env-file", help="load environment variables from this .env file first")
    parser.add_argument("--json-logs", action="store_true", help="emit JSON log lines")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> SyncSettings:
    loaders: list[SettingsLoader] = [EnvSettingsLoader()]
    if args.env_file:
        loaders = [DotenvSettingsLoader(args.env_file)]
    overrides = {
        "flags_file": args.flags_file,
        "base_url": args.base_url,
        "token": args.token,
        "project_id": args.project_id,
        "request_timeout": args.request_timeout,
        "page_size": args.page_size,
        "fetch_concurrency": args.concurrency,
        "apply_concurrency": args.concurrency,
        "dry_run": args.dry_run,
    }
    return SettingsFactory.create(SyncSettings, loaders=loaders, overrides=overrides)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO, json_output=args.json_logs)

    try:
        settings = load_settings(args)
    except ConfigError as exc:
        logger.error("config.invalid", error=exc.message)
        return EXIT_CONFIG

    logger.info(
        "config.loaded",
        flags_file=settings.flags_file,
        base_url=settings.base_url,
        project_id=settings.project_id,
        request_timeout=settings.request_timeout,
        dry_run=settings.dry_run,
    )

    try:
        desired = load_desired_flags(settings.flags_file)
        asyncio.run(synchronize(settings, desired))
    except DesiredStateError as exc:
        logger.error("flags_file.invalid", path=settings.flags_file, error=exc.message)
        return EXIT_FAILURE
    except SyncError as exc:
        logger.error("sync.failed", stage=exc.stage.value, error=exc.message, cause=_cause_chain(exc))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning("sync.interrupted")
        return EXIT_INTERRUPTED
    return EXIT_OK


def _cause_chain(exc: BaseException) -> str:
    messages = []
    current = exc.__cause__
    while current is not None:
        messages.append(getattr(current, "message", None) or str(current))
        current = current.__cause__
    return " <- ".join(messages)


__all__ = ["build_parser", "load_settings", "main"]
