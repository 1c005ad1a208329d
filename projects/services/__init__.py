from projects.services.project_service import ProjectService

__all__ = ["ProjectService"]
