from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """Category model - shared between projects."""

    __tablename__ = "category"

    category_id: int | None = Field(default=None, primary_key=True)
    category_name: str = Field(max_length=128, unique=True)


class ProjectCategory(SQLModel, table=True):
    """
    Join row linking a project to a category.

    Composite primary key; deleting either side removes the link.
    """

    __tablename__ = "project_category"

    project_id: int = Field(
        foreign_key="project.project_id",
        ondelete="CASCADE",
        primary_key=True,
    )
    category_id: int = Field(
        foreign_key="category.category_id",
        ondelete="CASCADE",
        primary_key=True,
    )
