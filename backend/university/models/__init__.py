from .departments import Department
from .instructors import Instructor
from .students import Student
from .courses import Course
from .course_assignments import CourseAssignment
from .enrollments import Enrollment, Grade
