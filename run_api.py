#!/usr/bin/env python3
"""Run the SpeedLearn API server."""

import argparse

import uvicorn

from speedlearn.config import get_settings


def main():
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Run the SpeedLearn API")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind to (default: from settings)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (default: from settings)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    args = parser.parse_args()
    settings = get_settings()

    host = args.host or settings.host
    port = args.port or settings.port

    print(f"Starting {settings.app_name} API on http://{host}:{port}")
    print(f"  - Health: http://{host}:{port}/api/health")

    uvicorn.run(
        "speedlearn.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
