#!/usr/bin/env python3
"""
Quick request helper

Usage:
  httpc-test get /posts/1 --base-url https://jsonplaceholder.typicode.com
  httpc-test get /posts/1 /todos/1 --base-url https://jsonplaceholder.typicode.com --no-body
  httpc-test post /posts --base-url https://jsonplaceholder.typicode.com --json '{"title": "t"}'
  httpc-test put https://example.com/notes/1 --text 'hello' --content-type text/markdown

Paths are requested in order on one client, so cookies carry over.
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, List, Optional

from httpc_test.application.client import PUSH_METHODS, Client
from httpc_test.application.ports.logger import LoggerPort
from httpc_test.application.push_content import PushContent, json_content, text_content
from httpc_test.domain.exceptions import HttpcTestError
from httpc_test.domain.transcript import print_response
from httpc_test.infrastructure.client_factory import new_client
from httpc_test.infrastructure.config.settings import Settings, load_settings
from httpc_test.infrastructure.logging.console_logger import ConsoleLogger
from httpc_test.infrastructure.logging.log_setup import setup_console_logging
from httpc_test.infrastructure.logging.loguru_logger import LoguruLogger

METHODS = ("get", "delete", "post", "put", "patch")


def _parse_json_payload(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON for --json: {exc}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="httpc-test", description="Issue requests and print the captured exchange")
    parser.add_argument("method", type=str.lower, choices=METHODS)
    parser.add_argument("paths", nargs="+", help="paths appended to --base-url, or absolute URLs")
    parser.add_argument("--base-url", type=str)
    body = parser.add_mutually_exclusive_group()
    body.add_argument("--json", dest="json_body", type=str, help="JSON request body")
    body.add_argument("--text", dest="text_body", type=str, help="text request body")
    parser.add_argument("--content-type", type=str, default="text/plain", help="content type for --text")
    parser.add_argument("--no-body", action="store_true", help="omit response bodies from the transcript")
    parser.add_argument("--env-file", type=str)
    parser.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "ERROR"])
    parser.add_argument("--log-format", choices=["text", "json"], default="text")
    return parser


def _build_content(args: argparse.Namespace) -> Optional[PushContent]:
    if args.json_body is not None:
        return json_content(_parse_json_payload(args.json_body))
    if args.text_body is not None:
        return text_content(args.text_body, args.content_type)
    return None


def _build_logger(args: argparse.Namespace, settings: Settings) -> LoggerPort:
    level = args.log_level or settings.log_level
    if args.log_format == "json":
        return ConsoleLogger(level=level)
    setup_console_logging(level)
    return LoguruLogger()


def _run(client: Client, method: str, paths: List[str], content: Optional[PushContent], include_body: bool) -> None:
    for path in paths:
        if method.upper() in PUSH_METHODS:
            response = client.do_push(method, path, content)
        elif method == "delete":
            response = client.do_delete(path)
        else:
            response = client.do_get(path)
        print_response(response, include_body=include_body, file=sys.stdout)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.method.upper() not in PUSH_METHODS and (args.json_body is not None or args.text_body is not None):
        parser.error(f"{args.method} does not take a request body")
    if args.method.upper() in PUSH_METHODS and args.json_body is None and args.text_body is None:
        parser.error(f"{args.method} requires --json or --text")

    try:
        settings = load_settings(env_file=args.env_file)
        content = _build_content(args)
        client = new_client(args.base_url, settings=settings, logger=_build_logger(args, settings))
        _run(client, args.method, args.paths, content, include_body=not args.no_body)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except HttpcTestError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
