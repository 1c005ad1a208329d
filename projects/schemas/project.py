from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

TWO_PLACES = Decimal("0.01")


class MaterialRead(BaseModel):
    """Schema for reading a material."""
    material_id: int
    project_id: int
    material_name: str
    num_required: int | None = None
    cost: Decimal | None = None


class StepRead(BaseModel):
    """Schema for reading a step."""
    step_id: int
    project_id: int
    step_text: str
    step_order: int


class CategoryRead(BaseModel):
    """Schema for reading a category."""
    category_id: int
    category_name: str


class ProjectBase(BaseModel):
    """Fields shared by every project schema."""
    project_name: str
    estimated_hours: Decimal | None = None
    actual_hours: Decimal | None = None
    difficulty: int | None = None
    notes: str | None = None

    @field_validator("estimated_hours", "actual_hours")
    @classmethod
    def scale_hours(cls, value: Decimal | None) -> Decimal | None:
        """Hours are always held with two decimal places."""
        if value is None:
            return None
        return value.quantize(TWO_PLACES)


class ProjectCreate(ProjectBase):
    """Schema for creating a new project."""


class ProjectUpdate(ProjectBase):
    """
    Schema for replacing a project's details.

    All five mutable fields are written, so callers merge unchanged values
    in before building it.
    """
    project_id: int


class ProjectRead(ProjectBase):
    """
    Schema for reading a project.

    The child collections are only filled when the project is fetched on its
    own; list results leave them empty.
    """
    project_id: int
    materials: list[MaterialRead] = Field(default_factory=list)
    steps: list[StepRead] = Field(default_factory=list)
    categories: list[CategoryRead] = Field(default_factory=list)
