"""
Sample school used to seed an empty database and to back the in-memory
repositories in tests.

build_school() returns a fully linked object graph: course assignments and
enrollments carry both their foreign key ids and their relationship objects,
so the graph can be walked without a database session.
"""
import logging
from collections import namedtuple
from datetime import date, datetime, timezone
from sqlalchemy.orm import Session

from university.database import Base, engine
from university.models import (
    Department, Instructor, Student, Course, CourseAssignment, Enrollment, Grade
)

logger = logging.getLogger(__name__)

School = namedtuple(
    "School",
    ["departments", "instructors", "courses", "students", "course_assignments", "enrollments"],
)

def build_students():
    return [
        Student(id=1, first_mid_name="Carson", last_name="Alexander", enrollment_date=date(2005, 9, 1)),
        Student(id=2, first_mid_name="Meredith", last_name="Alonso", enrollment_date=date(2002, 9, 1)),
        Student(id=3, first_mid_name="Arturo", last_name="Anand", enrollment_date=date(2003, 9, 1)),
        Student(id=4, first_mid_name="Gytis", last_name="Barzdukas", enrollment_date=date(2002, 9, 1)),
        Student(id=5, first_mid_name="Yan", last_name="Li", enrollment_date=date(2002, 9, 1)),
        Student(id=6, first_mid_name="Peggy", last_name="Justice", enrollment_date=date(2001, 9, 1)),
        Student(id=7, first_mid_name="Laura", last_name="Norman", enrollment_date=date(2003, 9, 1)),
        Student(id=8, first_mid_name="Nino", last_name="Olivetto", enrollment_date=date(2005, 9, 1)),
    ]

def build_instructors():
    return [
        Instructor(id=1, first_mid_name="Kim", last_name="Abercrombie", hire_date=date(1995, 3, 11)),
        Instructor(id=2, first_mid_name="Fadi", last_name="Fakhouri", hire_date=date(2002, 7, 6)),
        Instructor(id=3, first_mid_name="Roger", last_name="Harui", hire_date=date(1998, 7, 1)),
        Instructor(id=4, first_mid_name="Candace", last_name="Kapoor", hire_date=date(2001, 1, 15)),
        Instructor(id=5, first_mid_name="Roger", last_name="Zheng", hire_date=date(2004, 2, 12)),
    ]

def build_departments(instructors):
    now = datetime.now(timezone.utc)
    by_name = {i.last_name: i for i in instructors}
    rows = [
        (1, "English", 350000, "Abercrombie"),
        (2, "Mathematics", 100000, "Fakhouri"),
        (3, "Engineering", 350000, "Harui"),
        (4, "Economics", 100000, "Kapoor"),
    ]
    return [
        Department(
            id=dept_id,
            name=name,
            budget=budget,
            added_date=now,
            modified_date=now,
            start_date=date(2007, 9, 1),
            instructor_id=by_name[admin].id,
            administrator=by_name[admin],
        )
        for dept_id, name, budget, admin in rows
    ]

def build_courses(departments):
    by_name = {d.name: d for d in departments}
    rows = [
        (1, 1050, "Chemistry", 3, "Engineering"),
        (2, 4022, "Microeconomics", 3, "Economics"),
        (3, 4041, "Macroeconomics", 3, "Economics"),
        (4, 1045, "Calculus", 4, "Mathematics"),
        (5, 3141, "Trigonometry", 4, "Mathematics"),
        (6, 2021, "Composition", 3, "English"),
        (7, 2042, "Literature", 4, "English"),
    ]
    return [
        Course(
            id=course_id,
            course_number=number,
            title=title,
            credits=credits,
            department_id=by_name[dept].id,
            department=by_name[dept],
        )
        for course_id, number, title, credits, dept in rows
    ]

def build_course_assignments(courses, instructors):
    courses_by_title = {c.title: c for c in courses}
    instructors_by_name = {i.last_name: i for i in instructors}
    pairs = [
        ("Chemistry", "Kapoor"),
        ("Chemistry", "Harui"),
        ("Microeconomics", "Zheng"),
        ("Macroeconomics", "Zheng"),
        ("Calculus", "Fakhouri"),
        ("Trigonometry", "Harui"),
        ("Composition", "Abercrombie"),
        ("Literature", "Abercrombie"),
    ]
    assignments = []
    for title, last_name in pairs:
        course = courses_by_title[title]
        instructor = instructors_by_name[last_name]
        assignments.append(CourseAssignment(
            course_id=course.id,
            instructor_id=instructor.id,
            course=course,
            instructor=instructor,
        ))
    return assignments

def build_enrollments(courses, students):
    courses_by_title = {c.title: c for c in courses}
    students_by_name = {s.last_name: s for s in students}
    rows = [
        ("Alexander", "Chemistry", Grade.A),
        ("Alexander", "Microeconomics", Grade.C),
        ("Alexander", "Macroeconomics", Grade.B),
        ("Alonso", "Calculus", Grade.B),
        ("Alonso", "Trigonometry", Grade.B),
        ("Alonso", "Composition", Grade.B),
        ("Anand", "Chemistry", None),
        ("Anand", "Microeconomics", Grade.B),
        ("Barzdukas", "Chemistry", Grade.B),
        ("Li", "Composition", Grade.B),
        ("Justice", "Literature", Grade.B),
    ]
    enrollments = []
    for enrollment_id, (last_name, title, grade) in enumerate(rows, start=1):
        student = students_by_name[last_name]
        course = courses_by_title[title]
        enrollments.append(Enrollment(
            id=enrollment_id,
            student_id=student.id,
            course_id=course.id,
            grade=grade,
            student=student,
            course=course,
        ))
    return enrollments

def build_school() -> School:
    """Build a fresh, linked copy of the sample school."""
    students = build_students()
    instructors = build_instructors()
    departments = build_departments(instructors)
    courses = build_courses(departments)
    course_assignments = build_course_assignments(courses, instructors)
    enrollments = build_enrollments(courses, students)
    return School(departments, instructors, courses, students, course_assignments, enrollments)

def init_db():
    Base.metadata.create_all(bind=engine)

def seed_database(db: Session):
    """
        Insert the sample school unless the database already has students.
    """
    if db.query(Student).first():
        logger.info("Database already seeded, skipping")
        return False

    school = build_school()
    for rows in school:
        db.add_all(rows)
    db.commit()
    logger.info(
        f"Seeded {len(school.departments)} departments, {len(school.instructors)} instructors, "
        f"{len(school.courses)} courses and {len(school.students)} students"
    )
    return True
