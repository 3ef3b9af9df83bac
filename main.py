"""
Main entry point for the Resume API.

Usage:
    python main.py
    python main.py --host 0.0.0.0 --port 8080 --reload
    python main.py --create-tables   # dev only; production uses `alembic upgrade head`
"""

import argparse

import uvicorn

from config.settings import settings
from utils.database import create_db_and_tables


def main():
    parser = argparse.ArgumentParser(description="Run the Resume API server")
    parser.add_argument("--host", default=settings.API_HOST)
    parser.add_argument("--port", type=int, default=settings.API_PORT)
    parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    parser.add_argument("--create-tables", action="store_true", help="Create tables before starting")
    args = parser.parse_args()

    if args.create_tables:
        create_db_and_tables()
        print(f"Tables created on {settings.DATABASE_URL}")

    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
