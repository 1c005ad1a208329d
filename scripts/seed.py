#!/usr/bin/env python3
"""
Seed script that loads sample projects with materials, steps and categories.

The menu only edits project rows, so this is the way to get child rows into a
fresh database.

Usage:
    python -m scripts.seed [--clear] [--database-url URL]

Options:
    --clear          Delete all existing rows before seeding
    --database-url   Store to seed (defaults to PROJECTS_DATABASE_URL)
"""

import argparse
from decimal import Decimal

from sqlalchemy import delete, func
from sqlmodel import Session, select

from projects.database import init_db, make_engine, transaction
from projects.models import Category, Material, Project, ProjectCategory, Step

CATEGORIES = ["Doors and Windows", "Repairs", "Gardening", "Outdoor"]

SAMPLE_PROJECTS = [
    {
        "project": {
            "project_name": "Hang a door",
            "estimated_hours": Decimal("4.00"),
            "actual_hours": Decimal("3.50"),
            "difficulty": 3,
            "notes": "Use the door hangers from Home Depot",
        },
        "materials": [
            ("2-inch screws", 20, Decimal("1.09")),
            ("Door hinges", 3, Decimal("4.99")),
        ],
        "steps": [
            "Align hinges on the door frame",
            "Screw the hinges into the frame",
            "Hang the door on the hinges",
        ],
        "categories": ["Doors and Windows", "Repairs"],
    },
    {
        "project": {
            "project_name": "Build a raised garden bed",
            "estimated_hours": Decimal("6.00"),
            "actual_hours": None,
            "difficulty": 2,
            "notes": "Cedar lasts longest",
        },
        "materials": [
            ("Cedar boards 2x8x8", 4, Decimal("24.50")),
            ("Deck screws", 32, Decimal("0.15")),
        ],
        "steps": [
            "Cut two boards in half",
            "Screw the corners together",
            "Fill with soil",
        ],
        "categories": ["Gardening", "Outdoor"],
    },
]


def clear_data(engine) -> None:
    """Remove all rows, children first."""
    print("Clearing existing data...")
    with transaction(engine) as session:
        for model in (ProjectCategory, Step, Material, Project, Category):
            session.execute(delete(model))
    print("Data cleared.")


def get_or_create_categories(session: Session, names: list[str]) -> dict[str, int]:
    """Map category names to ids, inserting any that are missing."""
    existing = session.execute(select(Category).where(Category.category_name.in_(names)))
    ids = {category.category_name: category.category_id for category in existing.scalars().all()}

    for name in names:
        if name not in ids:
            category = Category(category_name=name)
            session.add(category)
            session.flush()
            ids[name] = category.category_id
    return ids


def seed(engine) -> list[int]:
    """Insert the sample projects and return their ids."""
    project_ids = []
    with transaction(engine) as session:
        category_ids = get_or_create_categories(session, CATEGORIES)

        for sample in SAMPLE_PROJECTS:
            project = Project(**sample["project"])
            session.add(project)
            session.flush()

            for name, num_required, cost in sample["materials"]:
                session.add(Material(
                    project_id=project.project_id,
                    material_name=name,
                    num_required=num_required,
                    cost=cost,
                ))

            for order, text in enumerate(sample["steps"], start=1):
                session.add(Step(project_id=project.project_id, step_text=text, step_order=order))

            for name in sample["categories"]:
                session.add(ProjectCategory(
                    project_id=project.project_id,
                    category_id=category_ids[name],
                ))

            print(f"Created project: {project.project_name} ({project.project_id})")
            project_ids.append(project.project_id)

    return project_ids


def print_stats(engine) -> None:
    with transaction(engine) as session:
        print("\n=== Row counts ===")
        for model in (Project, Material, Step, Category, ProjectCategory):
            count = session.execute(select(func.count()).select_from(model)).scalar()
            print(f"{model.__tablename__:17} {count}")


def main():
    parser = argparse.ArgumentParser(description="Seed the database with sample projects")
    parser.add_argument("--clear", action="store_true", help="Clear existing data first")
    parser.add_argument("--database-url", type=str, default=None, help="SQLAlchemy database URL")

    args = parser.parse_args()

    print("=== Projects Seed Script ===")

    engine = make_engine(args.database_url)
    init_db(engine)

    if args.clear:
        clear_data(engine)

    seed(engine)
    print_stats(engine)

    print("\n=== Seeding Complete ===")
    engine.dispose()


if __name__ == "__main__":
    main()
