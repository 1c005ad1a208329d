from decimal import Decimal

from sqlmodel import SQLModel, Field


class Project(SQLModel, table=True):
    """Project row - the root of materials, steps and categories."""

    __tablename__ = "project"

    project_id: int | None = Field(default=None, primary_key=True)
    project_name: str = Field(max_length=128)
    estimated_hours: Decimal | None = Field(default=None, max_digits=7, decimal_places=2)
    actual_hours: Decimal | None = Field(default=None, max_digits=7, decimal_places=2)
    difficulty: int | None = Field(default=None)
    notes: str | None = Field(default=None)
