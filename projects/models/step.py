from sqlmodel import SQLModel, Field


class Step(SQLModel, table=True):
    """
    One instruction of a project.

    step_order gives the position within the project; steps are always
    read back sorted by it.
    """

    __tablename__ = "step"

    step_id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="project.project_id", ondelete="CASCADE", index=True)
    step_text: str
    step_order: int
