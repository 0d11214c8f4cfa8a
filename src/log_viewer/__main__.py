"""Run the log-viewer service: ``python -m log_viewer`` or ``log-viewer``."""
from __future__ import annotations

import argparse

import uvicorn

from log_viewer.app import create_app
from log_viewer.config import LogViewerSettings
from log_viewer.config.app_settings import CONFIG_FILE, ENV_FILE
from log_viewer.observability.logging import JsonLoggerFactory, get_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="log-viewer", description="Log search HTTP service")
    parser.add_argument("--config", default=CONFIG_FILE, help=f"JSON settings file (default: {CONFIG_FILE})")
    parser.add_argument("--env-file", default=ENV_FILE, help=f"dotenv file (default: {ENV_FILE})")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = LogViewerSettings.load(config_file=args.config, env_file=args.env_file)
    JsonLoggerFactory.configure(settings.log_level_no, json=settings.json_logs)
    get_logger(__name__).debug("starting", settings=settings)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
