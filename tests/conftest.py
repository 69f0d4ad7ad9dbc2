"""Shared fixtures: the sample school behind in-memory repositories."""

from unittest.mock import AsyncMock

import pytest

from university.controllers.binding import ModelBinder
from university.controllers.departments import DepartmentsController
from university.controllers.instructors import InstructorsController
from university.models import Course, CourseAssignment, Department, Instructor
from university.repositories.memory import InMemoryPersonRepository, InMemoryRepository
from university.seed import build_school


@pytest.fixture
def school():
    return build_school()


@pytest.fixture
def department_repo(school):
    return InMemoryRepository(Department, school.departments)


@pytest.fixture
def instructor_repo(school):
    return InMemoryPersonRepository(Instructor, school.instructors)


@pytest.fixture
def course_repo(school):
    return InMemoryRepository(Course, school.courses)


@pytest.fixture
def course_assignment_repo(school):
    return InMemoryRepository(CourseAssignment, school.course_assignments)


@pytest.fixture
def model_binder():
    """A binder that refuses to bind unless a test says otherwise."""
    binder = AsyncMock(spec=ModelBinder)
    binder.try_update_model.return_value = False
    return binder


@pytest.fixture
def departments_controller(department_repo):
    return DepartmentsController(department_repo)


@pytest.fixture
def instructors_controller(
    instructor_repo, department_repo, course_repo, course_assignment_repo, model_binder
):
    return InstructorsController(
        instructor_repo, department_repo, course_repo, course_assignment_repo, model_binder
    )
