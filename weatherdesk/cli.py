"""CLI entry point for the weather report service."""

import argparse
import json
import logging
from datetime import date

from weatherdesk.config.loader import get_config_value, load_config
from weatherdesk.errors import UpstreamError
from weatherdesk.ingest.http_client import build_http_client
from weatherdesk.pipeline.report_pipeline import ReportPipeline


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdesk",
        description="Local weather, forecast and history report service",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--log-level", default="INFO", help="Logging level (default INFO)"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP service")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # report
    report_p = sub.add_parser("report", help="Build one report and print it")
    report_p.add_argument(
        "--date", type=date.fromisoformat, default=None,
        help="As-of date YYYY-MM-DD (default: today, UTC)",
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. history.max_workers")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "report":
        return _cmd_report(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherdesk.server import create_app

    uvicorn.run(
        create_app(config),
        host=args.host or config.server.host,
        port=args.port or config.server.port,
        log_level=args.log_level.lower(),
    )
    return 0


def _cmd_report(config, args) -> int:
    with build_http_client(config.upstream) as client:
        pipeline = ReportPipeline.from_config(config, client)
        try:
            report = pipeline.produce_report(as_of=args.date)
        except UpstreamError as e:
            print(f"Error: {e}")
            return 1
    print(json.dumps(report.to_dict(), indent=2))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    print("Use: config show | config get key")
    return 1
