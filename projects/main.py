"""
Projects - console manager for DIY projects.

Usage:
    projects-app [--database-url URL] [--log-level LEVEL] [--no-create-schema]
    python -m projects
"""

import argparse
import sys
from typing import Optional, Sequence

from projects import __version__
from projects.config import get_settings
from projects.dao import ProjectDao
from projects.database import init_db, make_engine
from projects.exceptions import DbException
from projects.logging_config import get_logger, setup_logging
from projects.menu import ProjectsMenu
from projects.services import ProjectService

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projects-app",
        description="Manage projects, their materials, steps and categories",
    )
    parser.add_argument("--database-url", type=str, default=None, help="SQLAlchemy database URL")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument(
        "--no-create-schema",
        action="store_true",
        help="Do not create missing tables at startup",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(level=args.log_level, json_format=settings.log_json)

    engine = make_engine(args.database_url)
    logger.info(f"Starting Projects {__version__}...")

    try:
        if settings.create_schema and not args.no_create_schema:
            init_db(engine)
            logger.info("Database initialized")

        menu = ProjectsMenu(ProjectService(ProjectDao(engine)))
        menu.process_user_selections()
    except DbException as e:
        logger.error(f"Startup failed: {e}")
        print(f"\nError: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nExiting the menu...")
    finally:
        engine.dispose()
        logger.info("Shutting down Projects...")


if __name__ == "__main__":
    main()
