"""
Console menu for Projects.

ProjectsMenu reads a numbered selection, runs the matching operation through
ProjectService and prints the outcome. The only session state is the
currently selected project, held in MenuState.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from projects.exceptions import InputError
from projects.logging_config import get_logger
from projects.schemas import ProjectCreate, ProjectRead, ProjectUpdate
from projects.schemas.project import TWO_PLACES
from projects.services import ProjectService

logger = get_logger(__name__)

EXIT_SELECTION = -1

# ASCII digits only: no digit-group underscores, no digits from other scripts
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

OPERATIONS = [
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
]


@dataclass
class MenuState:
    """Session state owned by the menu loop."""
    current_project: Optional[ProjectRead] = None


def format_project(project: ProjectRead) -> str:
    """Render a project with its materials, steps and categories."""
    lines = [
        f"\n   ID={project.project_id}",
        f"   name={project.project_name}",
        f"   estimatedHours={project.estimated_hours}",
        f"   actualHours={project.actual_hours}",
        f"   difficulty={project.difficulty}",
        f"   notes={project.notes}",
        "",
        "   Materials:",
    ]
    for material in project.materials:
        lines.append(
            f"      ID={material.material_id}, materialName={material.material_name}, "
            f"numRequired={material.num_required}, cost={material.cost}"
        )

    lines += ["", "   Steps:"]
    for step in project.steps:
        lines.append(f"      ID={step.step_id}, stepOrder={step.step_order}, stepText={step.step_text}")

    lines += ["", "   Categories:"]
    for category in project.categories:
        lines.append(f"      ID={category.category_id}, categoryName={category.category_name}")

    return "\n".join(lines)


class ProjectsMenu:
    """
    Interactive menu loop.

    Input and output are injectable so the loop can be driven from tests:
    ``input_func`` behaves like ``input`` and ``output`` like ``print``.
    """

    def __init__(
        self,
        service: ProjectService,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.service = service
        self.input_func = input_func or input
        self.output = output or print
        self.state = MenuState()
        self.handlers: dict[int, Callable[[], None]] = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
        }

    def process_user_selections(self) -> None:
        """Run until the user enters a blank selection or input ends."""
        done = False

        while not done:
            try:
                selection = self.get_user_selection()

                if selection == EXIT_SELECTION:
                    done = self.exit_menu()
                    continue

                handler = self.handlers.get(selection)
                if handler is None:
                    self.output(f"\n{selection} is not a valid selection. Try again.")
                else:
                    handler()
            except EOFError:
                done = self.exit_menu()
            except Exception as e:
                logger.warning(f"Menu operation failed: {e}")
                logger.debug("Menu operation traceback", exc_info=True)
                self.output(f"\nError: {e} Try again.")

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def create_project(self) -> None:
        project_name = self.get_string_input("Enter the project name")
        estimated_hours = self.get_decimal_input("Enter the estimated hours")
        actual_hours = self.get_decimal_input("Enter the actual hours")
        difficulty = self.get_int_input("Enter the project difficulty (1-5)")
        notes = self.get_string_input("Enter the project notes")

        project = ProjectCreate(
            project_name=project_name,
            estimated_hours=estimated_hours,
            actual_hours=actual_hours,
            difficulty=difficulty,
            notes=notes,
        )

        db_project = self.service.add_project(project)
        self.output(f"You have successfully created project: {format_project(db_project)}")

    def list_projects(self) -> None:
        projects = self.service.fetch_all_projects()

        self.output("\nProjects:")
        for project in projects:
            self.output(f"   {project.project_id}: {project.project_name}")

    def select_project(self) -> None:
        self.list_projects()

        project_id = self.get_int_input("Enter a project ID to select a project")

        # A failed fetch must not leave the previous selection in place
        self.state.current_project = None
        self.state.current_project = self.service.fetch_project_by_id(project_id)

    def update_project_details(self) -> None:
        current = self.state.current_project
        if current is None:
            self.output("\nPlease select a project.")
            return

        project_name = self.get_string_input(f"Enter the project name [{current.project_name}]")
        estimated_hours = self.get_decimal_input(f"Enter the estimated hours [{current.estimated_hours}]")
        actual_hours = self.get_decimal_input(f"Enter the actual hours [{current.actual_hours}]")
        difficulty = self.get_int_input(f"Enter the project difficulty (1-5) [{current.difficulty}]")
        notes = self.get_string_input(f"Enter the project notes [{current.notes}]")

        project = ProjectUpdate(
            project_id=current.project_id,
            project_name=current.project_name if project_name is None else project_name,
            estimated_hours=current.estimated_hours if estimated_hours is None else estimated_hours,
            actual_hours=current.actual_hours if actual_hours is None else actual_hours,
            difficulty=current.difficulty if difficulty is None else difficulty,
            notes=current.notes if notes is None else notes,
        )

        self.service.modify_project_details(project)

        # Re-read so the session sees what the store actually holds
        self.state.current_project = self.service.fetch_project_by_id(current.project_id)

    def delete_project(self) -> None:
        self.list_projects()

        project_id = self.get_int_input("Enter the ID of the project to delete")

        self.service.delete_project(project_id)
        self.output(f"Project {project_id} was deleted successfully.")

        current = self.state.current_project
        if current is not None and current.project_id == project_id:
            self.state.current_project = None

    def exit_menu(self) -> bool:
        self.output("Exiting the menu...")
        return True

    # -------------------------------------------------------------------------
    # Rendering and input
    # -------------------------------------------------------------------------

    def get_user_selection(self) -> int:
        self.print_operations()
        selection = self.get_int_input("Enter a menu selection")
        return EXIT_SELECTION if selection is None else selection

    def print_operations(self) -> None:
        self.output("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            self.output(f"  {line}")

        if self.state.current_project is None:
            self.output("\nYou are not working with a project.")
        else:
            self.output(f"\nYou are working with project: {format_project(self.state.current_project)}")

    def get_string_input(self, prompt: str) -> Optional[str]:
        """Blank input means no value."""
        text = self.input_func(f"{prompt}: ")
        return None if not text.strip() else text.strip()

    def get_int_input(self, prompt: str) -> Optional[int]:
        text = self.get_string_input(prompt)
        if text is None:
            return None
        if not INT_PATTERN.fullmatch(text):
            raise InputError(text, "number")
        return int(text)

    def get_decimal_input(self, prompt: str) -> Optional[Decimal]:
        """
        Read a decimal held at two places.

        "5" becomes 5.00; values that would need rounding are rejected.
        """
        text = self.get_string_input(prompt)
        if text is None:
            return None
        if not DECIMAL_PATTERN.fullmatch(text):
            raise InputError(text, "decimal number")
        try:
            value = Decimal(text)
            scaled = value.quantize(TWO_PLACES)
        except InvalidOperation:
            raise InputError(text, "decimal number")

        if scaled != value:
            raise InputError(text, "decimal number")
        return scaled
