"""Story and quiz services - process entry points.

Each service runs as its own process bound to its own port:

    api-gateway            8080
    gptclient-service      8081
    shortstories-service   8082
    quiz-service           8083

Run one with its console script (``quiz-service``) or with
``python main.py quiz-service [--port N] [--host H]``.
"""

import argparse
from typing import Optional, Sequence

import uvicorn

from app import create_app
from app.services import SERVICES, get_service
from app.utils.logging import configure_logging, get_logger
from config import Settings, settings as default_settings

logger = get_logger()


def run(service_name: str, settings: Optional[Settings] = None) -> None:
    """Start one service and block serving.

    A bind failure (port already in use) is not handled; uvicorn exits the
    process with a non-zero status.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    service = get_service(service_name)
    port = settings.resolve_port(service)
    app = create_app(service, settings)

    logger.info(service.startup_message(port))
    uvicorn.run(app, host=settings.host, port=port)


def run_api_gateway() -> None:
    run("api-gateway")


def run_gptclient_service() -> None:
    run("gptclient-service")


def run_shortstories_service() -> None:
    run("shortstories-service")


def run_quiz_service() -> None:
    run("quiz-service")


def port_number(value: str) -> int:
    """argparse type for a TCP port in 1..65535."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be between 1 and 65535, got {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run one of the story and quiz services.")
    parser.add_argument("service", choices=sorted(SERVICES), help="Service to run")
    parser.add_argument("--port", type=port_number, default=None, help="Override the service port")
    parser.add_argument("--host", default=None, help="Override the bind address")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.port is not None:
        overrides["port"] = args.port
    if args.host is not None:
        overrides["host"] = args.host
    settings = Settings(**overrides) if overrides else None

    run(args.service, settings)


if __name__ == "__main__":
    main()
