"""
Data access for projects.

Each public method is one transaction on one connection (see
``projects.database.transaction``): it commits when the statements succeed and
rolls back otherwise, surfacing store errors as DbException.

Rows are mapped to schema records field by field. Only
``fetch_project_by_id`` loads materials, steps and categories; the list query
never issues per-row child queries.
"""

from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from projects.database import get_engine, transaction
from projects.logging_config import get_logger
from projects.models import Category, Material, Project, ProjectCategory, Step
from projects.schemas import (
    CategoryRead,
    MaterialRead,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    StepRead,
)

logger = get_logger(__name__)


class ProjectDao:
    """Parameterized SQL against the project, material, step and category tables."""

    def __init__(self, engine: Engine | None = None):
        self.engine = engine or get_engine()

    def insert_project(self, project: ProjectCreate) -> ProjectRead:
        """Insert a project and return it with the store-assigned id."""
        with transaction(self.engine) as session:
            row = Project(
                project_name=project.project_name,
                estimated_hours=project.estimated_hours,
                actual_hours=project.actual_hours,
                difficulty=project.difficulty,
                notes=project.notes,
            )
            session.add(row)
            # Flush issues the INSERT so the id is known before commit
            session.flush()
            created = _to_project(row)

        logger.info(f"Inserted project: id={created.project_id} name='{created.project_name}'")
        return created

    def fetch_all_projects(self) -> list[ProjectRead]:
        """All projects ordered by name, without child collections."""
        with transaction(self.engine) as session:
            result = session.execute(select(Project).order_by(Project.project_name))
            projects = [_to_project(row) for row in result.scalars().all()]

        logger.debug(f"Fetched {len(projects)} projects")
        return projects

    def fetch_project_by_id(self, project_id: int) -> ProjectRead | None:
        """
        Fetch one project with its materials, steps and categories.

        Returns None when no row matches. All four queries share the
        transaction.
        """
        with transaction(self.engine) as session:
            result = session.execute(select(Project).where(Project.project_id == project_id))
            row = result.scalars().first()
            if row is None:
                logger.debug(f"No project with id={project_id}")
                return None

            project = _to_project(row)
            project.materials.extend(_fetch_materials(session, project_id))
            project.steps.extend(_fetch_steps(session, project_id))
            project.categories.extend(_fetch_categories(session, project_id))

        return project

    def modify_project_details(self, project: ProjectUpdate) -> bool:
        """Replace all mutable columns. True iff exactly one row was updated."""
        statement = (
            update(Project)
            .where(Project.project_id == project.project_id)
            .values(
                project_name=project.project_name,
                estimated_hours=project.estimated_hours,
                actual_hours=project.actual_hours,
                difficulty=project.difficulty,
                notes=project.notes,
            )
        )
        with transaction(self.engine) as session:
            modified = session.execute(statement).rowcount == 1

        logger.info(f"Updated project {project.project_id}: modified={modified}")
        return modified

    def delete_project(self, project_id: int) -> bool:
        """Delete a project. True iff exactly one row was deleted."""
        statement = delete(Project).where(Project.project_id == project_id)
        with transaction(self.engine) as session:
            deleted = session.execute(statement).rowcount == 1

        logger.info(f"Deleted project {project_id}: deleted={deleted}")
        return deleted


def _fetch_materials(session: Session, project_id: int) -> list[MaterialRead]:
    query = (
        select(Material)
        .where(Material.project_id == project_id)
        .order_by(Material.material_id)
    )
    return [_to_material(row) for row in session.execute(query).scalars().all()]


def _fetch_steps(session: Session, project_id: int) -> list[StepRead]:
    query = (
        select(Step)
        .where(Step.project_id == project_id)
        .order_by(Step.step_order, Step.step_id)
    )
    return [_to_step(row) for row in session.execute(query).scalars().all()]


def _fetch_categories(session: Session, project_id: int) -> list[CategoryRead]:
    query = (
        select(Category)
        .join(ProjectCategory, ProjectCategory.category_id == Category.category_id)
        .where(ProjectCategory.project_id == project_id)
        .order_by(Category.category_name)
    )
    return [_to_category(row) for row in session.execute(query).scalars().all()]


def _to_project(row: Project) -> ProjectRead:
    return ProjectRead(
        project_id=row.project_id,
        project_name=row.project_name,
        estimated_hours=row.estimated_hours,
        actual_hours=row.actual_hours,
        difficulty=row.difficulty,
        notes=row.notes,
    )


def _to_material(row: Material) -> MaterialRead:
    return MaterialRead(
        material_id=row.material_id,
        project_id=row.project_id,
        material_name=row.material_name,
        num_required=row.num_required,
        cost=row.cost,
    )


def _to_step(row: Step) -> StepRead:
    return StepRead(
        step_id=row.step_id,
        project_id=row.project_id,
        step_text=row.step_text,
        step_order=row.step_order,
    )


def _to_category(row: Category) -> CategoryRead:
    return CategoryRead(
        category_id=row.category_id,
        category_name=row.category_name,
    )
