"""Uvicorn runner for the SPM Café API.

Usage:
    python src/server.py                 # Host and port from the environment
    python src/server.py --port 8080     # Override the port
    python src/server.py --reload        # Auto-reload during development
"""

import argparse

import uvicorn

from shared.config import get_settings, load_env


def main():
    load_env()
    settings = get_settings()

    parser = argparse.ArgumentParser(description="SPM Café API server")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
