"""
Stock Price Aggregator entry point.

Serves the dashboard API with uvicorn.
"""
import argparse

import uvicorn

from stock_aggregator.config.settings import Config
from stock_aggregator.logging import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    config = Config()
    parser = argparse.ArgumentParser(description="Stock Price Aggregator API server")
    parser.add_argument("--host", default=config.api_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=config.api_port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(Config())
    uvicorn.run(
        "stock_aggregator.dashboard.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
