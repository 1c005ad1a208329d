from projects.models.project import Project
from projects.models.category import Category, ProjectCategory
from projects.models.material import Material
from projects.models.step import Step

__all__ = [
    "Project",
    "Category",
    "ProjectCategory",
    "Material",
    "Step",
]
