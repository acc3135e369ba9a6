#!/usr/bin/env python3
"""
Database management script for the Timekeeper backend.
Handles database initialization, migrations, and seeding.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from alembic.config import Config
from alembic import command

from timekeeper.application.use_cases.project_use_cases import SeedProjectsUseCase
from timekeeper.infrastructure.db.database import SessionLocal
from timekeeper.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository


ALEMBIC_INI = str(Path(__file__).parent / "alembic.ini")


def alembic_config() -> Config:
    return Config(ALEMBIC_INI)


def init_database():
    """Create the schema of a fresh database."""
    print("Initializing database...")
    command.upgrade(alembic_config(), "head")


def create_migration(message: str = "Auto-generated migration"):
    """Create a new migration."""
    print(f"Creating migration: {message}")
    command.revision(alembic_config(), message=message, autogenerate=True)


def run_migrations():
    """Run pending migrations."""
    print("Running migrations...")
    command.upgrade(alembic_config(), "head")


def rollback_migration():
    """Rollback last migration."""
    print("Rolling back migration...")
    command.downgrade(alembic_config(), "-1")


def reset_database():
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Resetting database...")
        command.downgrade(alembic_config(), "base")
        command.upgrade(alembic_config(), "head")
    else:
        print("Database reset cancelled.")


def show_current_revision():
    """Show current database revision."""
    command.current(alembic_config())


def show_history():
    """Show migration history."""
    command.history(alembic_config())


def seed_projects():
    """Create the sample projects when the database has none."""
    session = SessionLocal()
    try:
        created = SeedProjectsUseCase(SQLAlchemyProjectRepository(session)).execute()
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    if created:
        print(f"Created {len(created)} sample projects: {', '.join(project.name for project in created)}")
    else:
        print("Projects already exist, nothing to seed.")


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  init           - Create the schema of a fresh database")
        print("  create [msg]   - Create new migration")
        print("  migrate        - Run pending migrations")
        print("  rollback       - Rollback last migration")
        print("  reset          - Reset database (WARNING: drops all data)")
        print("  current        - Show current revision")
        print("  history        - Show migration history")
        print("  seed           - Create sample projects")
        return

    command_name = sys.argv[1]

    if command_name == "init":
        init_database()
    elif command_name == "create":
        message = " ".join(sys.argv[2:]) if len(sys.argv) > 2 else "Auto-generated migration"
        create_migration(message)
    elif command_name == "migrate":
        run_migrations()
    elif command_name == "rollback":
        rollback_migration()
    elif command_name == "reset":
        reset_database()
    elif command_name == "current":
        show_current_revision()
    elif command_name == "history":
        show_history()
    elif command_name == "seed":
        seed_projects()
    else:
        print(f"Unknown command: {command_name}")
        sys.exit(1)


if __name__ == "__main__":
    main()
