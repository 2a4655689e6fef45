"""CLI entry point for the CWA forecast gateway."""

import argparse
import asyncio
import json
import logging
import sys

from gateway.config.loader import load_config
from gateway.errors import GatewayError
from gateway.pipeline.forecast_pipeline import ForecastPipeline

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cwa-gateway",
        description="CWA weather forecast gateway",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Listen port")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Fetch one forecast and print JSON")
    forecast_p.add_argument("location", help="Location code, e.g. kaohsiung")

    # locations / config
    sub.add_parser("locations", help="List supported location codes")
    sub.add_parser("config", help="Display effective config")

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
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "locations":
        return _cmd_locations(config)
    elif args.command == "config":
        return _cmd_config(config)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from gateway.api import create_app

    host = args.host or config.host
    port = args.port or config.port
    logger.info("Server starting on %s:%d", host, port)
    logger.info("Environment: %s", config.environment)
    if not config.cwa_api_key:
        logger.warning("CWA_API_KEY is not set; /api/weather requests will fail")
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_forecast(config, args) -> int:
    pipeline = ForecastPipeline(config)
    try:
        result = asyncio.run(pipeline.run(args.location))
    except GatewayError as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False), file=sys.stderr)
        return 1
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


def _cmd_locations(config) -> int:
    for loc in config.locations:
        print(f"{loc.code}\t{loc.name}")
    return 0


def _cmd_config(config) -> int:
    masked = config.model_copy(
        update={"cwa_api_key": "***" if config.cwa_api_key else ""}
    )
    print(masked.model_dump_json(indent=2))
    return 0
