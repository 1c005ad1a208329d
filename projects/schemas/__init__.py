from projects.schemas.project import (
    CategoryRead,
    MaterialRead,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    StepRead,
)

__all__ = [
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectRead",
    "MaterialRead",
    "StepRead",
    "CategoryRead",
]
