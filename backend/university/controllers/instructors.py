import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from university.controllers.base import Controller
from university.controllers.binding import ModelBinder
from university.models.course_assignments import CourseAssignment
from university.models.instructors import Instructor
from university.repositories.base import Repository, PersonRepository

logger = logging.getLogger(__name__)

COURSES_KEY = "Courses"
INSTRUCTOR_ID_KEY = "InstructorID"
COURSE_ID_KEY = "CourseID"

BOUND_FIELDS = ("first_mid_name", "last_name", "hire_date")

SAVE_FAILED_MESSAGE = (
    "Unable to save changes. Try again, and if the problem persists, "
    "see your system administrator."
)

@dataclass
class AssignedCourseData:
    course_id: int
    title: str
    assigned: bool
    department: Optional[str] = None

@dataclass
class InstructorIndexData:
    instructors: List[Instructor]
    courses: Optional[list] = None
    enrollments: Optional[list] = None


class InstructorsController(Controller):
    def __init__(
        self,
        instructor_repo: PersonRepository,
        department_repo: Repository,
        course_repo: Repository,
        course_assignment_repo: Repository,
        model_binder: ModelBinder,
    ):
        super().__init__()
        self.instructors = instructor_repo
        self.departments = department_repo
        self.courses = course_repo
        self.course_assignments = course_assignment_repo
        self.model_binder = model_binder

    async def index(self, instructor_id: Optional[int] = None, course_id: Optional[int] = None):
        """
            List instructors; optionally the courses of one instructor and the
            enrollments of one course.
        """
        view_model = InstructorIndexData(instructors=self.instructors.get_all())

        if instructor_id is not None:
            self.view_data[INSTRUCTOR_ID_KEY] = instructor_id
            instructor = next((i for i in view_model.instructors if i.id == instructor_id), None)
            view_model.courses = (
                [assignment.course for assignment in instructor.course_assignments]
                if instructor is not None else []
            )

        if course_id is not None:
            self.view_data[COURSE_ID_KEY] = course_id
            if view_model.courses is not None:
                course = next((c for c in view_model.courses if c is not None and c.id == course_id), None)
            else:
                course = self.courses.get(course_id)
            view_model.enrollments = list(course.enrollments) if course is not None else []

        return self.view(view_model)

    async def details(self, id: Optional[int]):
        if id is None:
            return self.not_found()

        instructor = self.instructors.get(id)
        if instructor is None:
            return self.not_found()

        return self.view(instructor)

    def create(self):
        self._populate_assigned_course_data(Instructor())
        return self.view()

    async def create_post(self, instructor: Instructor, selected_courses: Optional[Iterable[str]]):
        if selected_courses is not None:
            assigned = {assignment.course_id for assignment in instructor.course_assignments}
            for course_id in self._parse_course_ids(selected_courses):
                if self.courses.get(course_id) is None:
                    self.model_state.add_model_error("selected_courses", f"Course {course_id} does not exist")
                elif course_id not in assigned:
                    instructor.course_assignments.append(
                        CourseAssignment(instructor_id=instructor.id, course_id=course_id)
                    )
                    assigned.add(course_id)

        if self.model_state.is_valid:
            self.instructors.add(instructor)
            for assignment in instructor.course_assignments:
                assignment.instructor_id = instructor.id
                self.course_assignments.add(assignment)
            try:
                self.instructors.save_changes()
            except SQLAlchemyError:
                logger.error(f"Could not create instructor {instructor.last_name}", exc_info=True)
                self.model_state.add_model_error("", SAVE_FAILED_MESSAGE)
            else:
                logger.info(f"Created instructor {instructor.id} ({instructor.full_name})")
                return self.redirect_to_action("Index")

        self._populate_assigned_course_data(instructor)
        return self.view(instructor)

    async def edit(self, id: Optional[int]):
        if id is None:
            return self.not_found()

        instructor = self.instructors.get(id)
        if instructor is None:
            return self.not_found()

        self._populate_assigned_course_data(instructor)
        return self.view(instructor)

    async def edit_post(self, id: Optional[int], selected_courses: Optional[Iterable[str]]):
        if id is None:
            return self.not_found()

        instructor = self.instructors.get(id)
        if instructor is None:
            return self.not_found()

        if await self.model_binder.try_update_model(self, instructor, "", BOUND_FIELDS):
            self._update_instructor_courses(selected_courses, instructor)
            try:
                self.instructors.update(instructor)
                self.instructors.save_changes()
            except SQLAlchemyError:
                logger.error(f"Could not save instructor {id}", exc_info=True)
                self.model_state.add_model_error("", SAVE_FAILED_MESSAGE)
            else:
                logger.info(f"Updated instructor {id}")
                return self.redirect_to_action("Index")
        else:
            self._update_instructor_courses(selected_courses, instructor)

        self._populate_assigned_course_data(instructor)
        return self.view(instructor)

    def _parse_course_ids(self, selected_courses: Iterable[str]) -> List[int]:
        course_ids = []
        for value in selected_courses:
            try:
                course_ids.append(int(value))
            except (TypeError, ValueError):
                self.model_state.add_model_error("selected_courses", f"'{value}' is not a valid course id")
        return course_ids

    def _update_instructor_courses(self, selected_courses: Optional[Iterable[str]], instructor: Instructor):
        # No selection means every checkbox was cleared
        selected = set(self._parse_course_ids(selected_courses or []))
        assigned = {assignment.course_id for assignment in instructor.course_assignments}

        for course in self.courses.get_all():
            if course.id in selected and course.id not in assigned:
                assignment = CourseAssignment(instructor_id=instructor.id, course_id=course.id)
                instructor.course_assignments.append(assignment)
                self.course_assignments.add(assignment)
            elif course.id not in selected and course.id in assigned:
                to_remove = next(a for a in instructor.course_assignments if a.course_id == course.id)
                instructor.course_assignments.remove(to_remove)
                self.course_assignments.delete(to_remove)

    def _populate_assigned_course_data(self, instructor: Instructor):
        assigned = {assignment.course_id for assignment in instructor.course_assignments}
        department_names = {d.id: d.name for d in self.departments.get_all()}
        self.view_data[COURSES_KEY] = [
            AssignedCourseData(
                course_id=course.id,
                title=course.title,
                assigned=course.id in assigned,
                department=department_names.get(course.department_id),
            )
            for course in self.courses.get_all()
        ]
