"""
Data-access tests against an in-memory SQLite store.
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from projects.exceptions import DbException
from projects.schemas import ProjectCreate, ProjectUpdate


class TestInsert:
    def test_insert_assigns_id_and_round_trips_fields(self, dao):
        created = dao.insert_project(ProjectCreate(
            project_name="Hang a door",
            estimated_hours=Decimal("4"),
            actual_hours=Decimal("3.5"),
            difficulty=3,
            notes="Use the door hangers",
        ))

        assert created.project_id is not None

        fetched = dao.fetch_project_by_id(created.project_id)
        assert fetched.project_name == "Hang a door"
        assert fetched.estimated_hours == Decimal("4.00")
        assert fetched.actual_hours == Decimal("3.50")
        assert fetched.difficulty == 3
        assert fetched.notes == "Use the door hangers"

    def test_insert_with_optional_fields_blank(self, dao):
        created = dao.insert_project(ProjectCreate(project_name="Paint fence"))

        fetched = dao.fetch_project_by_id(created.project_id)
        assert fetched.estimated_hours is None
        assert fetched.actual_hours is None
        assert fetched.difficulty is None
        assert fetched.notes is None

    def test_failed_insert_rolls_back_and_wraps_cause(self, dao):
        # Bypass validation so the NOT NULL constraint in the store rejects the row
        broken = ProjectCreate.model_construct(
            project_name=None,
            estimated_hours=None,
            actual_hours=None,
            difficulty=None,
            notes=None,
        )

        with pytest.raises(DbException) as exc_info:
            dao.insert_project(broken)

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert exc_info.value.cause is exc_info.value.__cause__
        assert dao.fetch_all_projects() == []


class TestFetch:
    def test_fetch_by_id_fresh_project_has_empty_collections(self, dao, make_project):
        created = make_project("Deck")

        fetched = dao.fetch_project_by_id(created.project_id)

        assert fetched.materials == []
        assert fetched.steps == []
        assert fetched.categories == []

    def test_fetch_by_id_missing_returns_none(self, dao):
        assert dao.fetch_project_by_id(42) is None

    def test_fetch_by_id_loads_children(self, dao, make_project, add_children):
        created = make_project("Hang a door")
        add_children(
            created.project_id,
            materials=[("Door hinges", 3, "4.99"), ("2-inch screws", 20, "1.09")],
            steps=[(2, "Screw hinges to frame"), (1, "Align hinges")],
            categories=["Repairs", "Doors and Windows"],
        )

        fetched = dao.fetch_project_by_id(created.project_id)

        assert [m.material_name for m in fetched.materials] == ["Door hinges", "2-inch screws"]
        assert fetched.materials[0].cost == Decimal("4.99")
        assert fetched.materials[0].num_required == 3
        assert [s.step_text for s in fetched.steps] == ["Align hinges", "Screw hinges to frame"]
        assert [c.category_name for c in fetched.categories] == ["Doors and Windows", "Repairs"]

    def test_children_are_scoped_to_project(self, dao, make_project, add_children):
        first = make_project("First")
        second = make_project("Second")
        add_children(first.project_id, materials=[("Nails", 100, "2.00")], steps=[(1, "Hammer")])

        fetched = dao.fetch_project_by_id(second.project_id)

        assert fetched.materials == []
        assert fetched.steps == []

    def test_fetch_all_orders_by_name(self, dao, make_project):
        make_project("Shed")
        make_project("Deck")
        make_project("Pergola")

        names = [p.project_name for p in dao.fetch_all_projects()]

        assert names == ["Deck", "Pergola", "Shed"]

    def test_fetch_all_never_populates_children(self, dao, make_project, add_children):
        created = make_project("Hang a door")
        add_children(
            created.project_id,
            materials=[("Door hinges", 3, "4.99")],
            steps=[(1, "Align hinges")],
            categories=["Repairs"],
        )

        [listed] = dao.fetch_all_projects()

        assert listed.project_id == created.project_id
        assert listed.materials == []
        assert listed.steps == []
        assert listed.categories == []


class TestModifyAndDelete:
    def test_modify_replaces_all_fields(self, dao, make_project):
        created = make_project("Deck", estimated_hours=Decimal("5"), difficulty=2)

        modified = dao.modify_project_details(ProjectUpdate(
            project_id=created.project_id,
            project_name="Big deck",
            estimated_hours=Decimal("8"),
            actual_hours=Decimal("9.25"),
            difficulty=4,
            notes="Pressure treated",
        ))

        assert modified is True
        fetched = dao.fetch_project_by_id(created.project_id)
        assert fetched.project_name == "Big deck"
        assert fetched.estimated_hours == Decimal("8.00")
        assert fetched.actual_hours == Decimal("9.25")
        assert fetched.difficulty == 4
        assert fetched.notes == "Pressure treated"

    def test_modify_with_unchanged_values_counts_row(self, dao, make_project):
        created = make_project("Deck")

        assert dao.modify_project_details(ProjectUpdate(
            project_id=created.project_id,
            project_name="Deck",
        )) is True

    def test_modify_missing_returns_false(self, dao, make_project):
        make_project("Deck")

        assert dao.modify_project_details(ProjectUpdate(project_id=999, project_name="Ghost")) is False
        assert [p.project_name for p in dao.fetch_all_projects()] == ["Deck"]

    def test_delete_existing(self, dao, make_project):
        created = make_project("Deck")

        assert dao.delete_project(created.project_id) is True
        assert dao.fetch_project_by_id(created.project_id) is None

    def test_delete_missing_returns_false(self, dao):
        assert dao.delete_project(999) is False

    def test_delete_cascades_to_children(self, dao, make_project, add_children):
        created = make_project("Hang a door")
        add_children(
            created.project_id,
            materials=[("Door hinges", 3, "4.99")],
            steps=[(1, "Align hinges")],
            categories=["Repairs"],
        )

        assert dao.delete_project(created.project_id) is True

        recreated = make_project("Another door")
        fetched = dao.fetch_project_by_id(recreated.project_id)
        assert fetched.materials == []
        assert fetched.steps == []
        assert fetched.categories == []
