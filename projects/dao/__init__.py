from projects.dao.project_dao import ProjectDao

__all__ = ["ProjectDao"]
