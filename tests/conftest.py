"""
Pytest configuration and fixtures for Projects tests.
"""

import logging
from decimal import Decimal

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from projects.dao import ProjectDao
from projects.database import init_db, make_engine, transaction
from projects.menu import ProjectsMenu
from projects.models import Category, Material, ProjectCategory, Step
from projects.schemas import ProjectCreate
from projects.services import ProjectService


# One shared in-memory connection per test
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine with all tables."""
    engine = make_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    init_db(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def dao(test_engine):
    return ProjectDao(test_engine)


@pytest.fixture
def service(dao):
    return ProjectService(dao)


@pytest.fixture
def make_project(service):
    """Insert a project through the service and return the created record."""

    def _make(name="Deck", **fields):
        return service.add_project(ProjectCreate(project_name=name, **fields))

    return _make


@pytest.fixture
def add_children(test_engine):
    """Attach materials, steps and categories to an existing project id."""

    def _add(project_id, materials=(), steps=(), categories=()):
        with transaction(test_engine) as session:
            for name, num_required, cost in materials:
                session.add(Material(
                    project_id=project_id,
                    material_name=name,
                    num_required=num_required,
                    cost=Decimal(cost),
                ))
            for order, text in steps:
                session.add(Step(project_id=project_id, step_text=text, step_order=order))
            for name in categories:
                category = Category(category_name=name)
                session.add(category)
                session.flush()
                session.add(ProjectCategory(project_id=project_id, category_id=category.category_id))

    return _add


class ScriptedConsole:
    """Feeds canned lines to the menu and records what it prints."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.printed = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text=""):
        self.printed.append(text)

    @property
    def text(self):
        return "\n".join(self.printed)


@pytest.fixture
def run_menu(service):
    """Run a menu over scripted input; returns (menu, console)."""

    def _run(lines, current_project=None):
        console = ScriptedConsole(lines)
        menu = ProjectsMenu(service, input_func=console.input, output=console.print)
        menu.state.current_project = current_project
        menu.process_user_selections()
        return menu, console

    return _run


@pytest.fixture
def restore_logging():
    """Put root logger handlers and levels back after setup_logging() ran."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    levels = {name: logging.getLogger(name).level for name in ("", "projects")}
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
