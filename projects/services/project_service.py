"""
Project service.

Forwards each operation to ProjectDao and turns "no such row" results into
NotFoundError.
"""

from projects.dao import ProjectDao
from projects.exceptions import NotFoundError
from projects.logging_config import get_logger
from projects.schemas import ProjectCreate, ProjectRead, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    def __init__(self, dao: ProjectDao | None = None):
        self.dao = dao or ProjectDao()

    def add_project(self, project: ProjectCreate) -> ProjectRead:
        return self.dao.insert_project(project)

    def fetch_all_projects(self) -> list[ProjectRead]:
        return self.dao.fetch_all_projects()

    def fetch_project_by_id(self, project_id: int) -> ProjectRead:
        """Fetch a fully populated project or raise NotFoundError."""
        project = self.dao.fetch_project_by_id(project_id)
        if project is None:
            raise NotFoundError(
                f"Project with project ID={project_id} does not exist.",
                project_id=project_id,
            )
        return project

    def modify_project_details(self, project: ProjectUpdate) -> None:
        """
        Replace a project's details.

        A result other than exactly one updated row is reported as a missing
        project.
        """
        if not self.dao.modify_project_details(project):
            logger.warning(f"Update matched no project: id={project.project_id}")
            raise NotFoundError(
                f"Project with ID={project.project_id} does not exist.",
                project_id=project.project_id,
            )

    def delete_project(self, project_id: int) -> None:
        if not self.dao.delete_project(project_id):
            logger.warning(f"Delete matched no project: id={project_id}")
            raise NotFoundError(
                f"Project with ID={project_id} does not exist.",
                project_id=project_id,
            )
