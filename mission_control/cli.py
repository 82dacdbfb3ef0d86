"""CLI interface for Mission Control."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import uvicorn

from mission_control.api.app import create_app
from mission_control.api.services.seed_service import SeedService
from mission_control.core.config import Config, load_config_or_default
from mission_control.core.logging import setup_logging
from mission_control.db.database import init_db_manager

logger = logging.getLogger(__name__)


def resolve_db_path(args: argparse.Namespace, config: Config) -> str:
    """Command-line --db-path wins over the config file."""
    return args.db_path or config.database.path


async def run_migrate(args: argparse.Namespace, config: Config) -> None:
    """Handle database migration commands."""
    if not args.init:
        logger.error("No migration action specified. Use --init")
        sys.exit(1)

    db_path = resolve_db_path(args, config)
    logger.info("Initializing database...")
    db_manager = init_db_manager(db_path)
    try:
        await db_manager.init_db()
        logger.info(f"Database initialized successfully at {db_path}")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        sys.exit(1)
    finally:
        await db_manager.close()


async def run_seed(args: argparse.Namespace, config: Config) -> None:
    """Create tables and load the demo crew."""
    db_path = resolve_db_path(args, config)
    db_manager = init_db_manager(db_path)
    try:
        await db_manager.init_db()
        async with db_manager.session() as session:
            result = await SeedService(session).seed()
        logger.info(
            f"Seeded {db_path}: {result.agents_created} agents created, "
            f"{result.agents_existing} already present, {result.tasks} tasks, "
            f"{result.messages} messages, {result.events} events"
        )
        for skipped in result.skipped:
            logger.info(f"  skipped {skipped}")
    except Exception as e:
        logger.error(f"Seed failed: {e}")
        sys.exit(1)
    finally:
        await db_manager.close()


async def run_api_server(args: argparse.Namespace, config: Config) -> None:
    """Start the FastAPI server."""
    app = create_app({
        "db_path": resolve_db_path(args, config),
        "cors_origins": config.api.cors_origins,
    })

    uvicorn_config = uvicorn.Config(
        app,
        host=args.host or config.api.host,
        port=args.port or config.api.port,
        log_level="info" if not args.verbose else "debug",
    )
    server = uvicorn.Server(uvicorn_config)
    await server.serve()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with serve/migrate/seed subcommands."""
    parser = argparse.ArgumentParser(description="Mission Control - agent monitoring dashboard API")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: $MISSION_CONTROL_CONFIG or config.yaml; defaults apply if missing)",
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=None,
        help="Path to SQLite database (overrides config; default: mission_control.db)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", type=str, default=None, help="API server host (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help="API server port (default: 8000)")

    migrate_parser = subparsers.add_parser("migrate", help="Database migration commands")
    migrate_parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize the database (create tables)",
    )

    subparsers.add_parser("seed", help="Create tables and load demo agents, tasks, messages and events")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config_or_default(args.config)
    setup_logging(
        level="DEBUG" if args.verbose else config.logging.level,
        directory=config.logging.directory,
        max_size_mb=config.logging.max_size_mb,
        backup_count=config.logging.backup_count,
    )

    if args.command == "migrate":
        await run_migrate(args, config)
    elif args.command == "seed":
        await run_seed(args, config)
    elif args.command in ("serve", None):
        if args.command is None:
            # Bare invocation serves with config defaults
            args.host = None
            args.port = None
        await run_api_server(args, config)


def run() -> None:
    """Entry point for the console script."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
