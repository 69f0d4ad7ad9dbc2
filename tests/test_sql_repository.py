"""SQLAlchemy repositories against an in-memory SQLite database."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from university.controllers.binding import ModelBinder
from university.controllers.instructors import InstructorsController
from university.controllers.results import ViewResult
from university.database import Base, enable_sqlite_foreign_keys
from university.models import Course, CourseAssignment, Department, Instructor, Student
from university.repositories.sql import SqlAlchemyPersonRepository, SqlAlchemyRepository
from university.seed import seed_database


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    seed_database(session)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def test_seed_is_idempotent(db):
    assert seed_database(db) is False
    assert db.query(Student).count() == 8


def test_get_all_and_get(db):
    repo = SqlAlchemyRepository(db, Department)

    assert len(repo.get_all()) == 4
    assert repo.get(1).name == "English"
    assert repo.get(1).budget == 350000
    assert repo.get(10) is None


def test_get_with_composite_key(db):
    repo = SqlAlchemyRepository(db, CourseAssignment)

    assert repo.get((6, 1)).course.title == "Composition"
    assert repo.get((6, 2)) is None


def test_find_and_first(db):
    repo = SqlAlchemyRepository(db, Course)

    assert {c.title for c in repo.find(department_id=4)} == {"Microeconomics", "Macroeconomics"}
    assert repo.first(title="Trigonometry").course_number == 3141


def test_person_repository_orders_and_searches(db):
    repo = SqlAlchemyPersonRepository(db, Instructor)

    assert [i.last_name for i in repo.get_all()] == [
        "Abercrombie", "Fakhouri", "Harui", "Kapoor", "Zheng"
    ]
    assert [i.last_name for i in repo.search("roger")] == ["Harui", "Zheng"]


def test_add_and_save(db):
    repo = SqlAlchemyPersonRepository(db, Instructor)

    instructor = repo.add(Instructor(first_mid_name="Ada", last_name="Lovelace"))
    repo.save_changes()

    assert instructor.id is not None
    assert repo.first(last_name="Lovelace") is instructor


def test_removing_assignment_deletes_row(db):
    instructors = SqlAlchemyPersonRepository(db, Instructor)
    assignments = SqlAlchemyRepository(db, CourseAssignment)
    instructor = instructors.get(1)

    assignment = next(a for a in instructor.course_assignments if a.course_id == 7)
    instructor.course_assignments.remove(assignment)
    assignments.delete(assignment)
    instructors.save_changes()

    assert assignments.get((7, 1)) is None
    assert [a.course_id for a in instructors.get(1).course_assignments] == [6]


def test_save_failure_rolls_back_and_raises(db):
    repo = SqlAlchemyRepository(db, Course)
    # Course ids are not generated, so a duplicate id violates the primary key
    repo.add(Course(id=1, course_number=9999, title="Duplicate", credits=3, department_id=1))

    with pytest.raises(SQLAlchemyError):
        repo.save_changes()

    assert repo.get(1).title == "Chemistry"


def test_foreign_keys_are_enforced(db):
    repo = SqlAlchemyRepository(db, CourseAssignment)
    repo.add(CourseAssignment(course_id=99, instructor_id=1))

    with pytest.raises(SQLAlchemyError):
        repo.save_changes()

    assert repo.find(course_id=99) == []


def test_create_with_unknown_course_is_not_saved(db):
    instructors = SqlAlchemyPersonRepository(db, Instructor)
    controller = InstructorsController(
        instructors,
        SqlAlchemyRepository(db, Department),
        SqlAlchemyRepository(db, Course),
        SqlAlchemyRepository(db, CourseAssignment),
        AsyncMock(spec=ModelBinder),
    )

    result = asyncio.run(controller.create_post(Instructor(first_mid_name="A", last_name="B"), ["99"]))

    assert isinstance(result, ViewResult)
    assert "selected_courses" in result.model_state
    assert instructors.first(last_name="B") is None
    assert db.query(CourseAssignment).filter_by(course_id=99).count() == 0


def test_edit_syncs_assignment_rows(db):
    assignments = SqlAlchemyRepository(db, CourseAssignment)
    binder = AsyncMock(spec=ModelBinder)
    binder.try_update_model.return_value = True
    controller = InstructorsController(
        SqlAlchemyPersonRepository(db, Instructor),
        SqlAlchemyRepository(db, Department),
        SqlAlchemyRepository(db, Course),
        assignments,
        binder,
    )

    asyncio.run(controller.edit_post(1, ["6", "2"]))

    assert assignments.get((2, 1)) is not None
    assert assignments.get((7, 1)) is None
    assert sorted(a.course_id for a in assignments.find(instructor_id=1)) == [2, 6]
