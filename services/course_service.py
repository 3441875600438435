"""Course write paths.

Every write recomputes the owning bootcamp's average cost, rounded up to the
next multiple of ten.
"""
import math

from flask import current_app

from extensions import db
from models import Bootcamp, Course, User

EDITABLE_FIELDS = ('title', 'description', 'weeks', 'tuition', 'minimum_skill', 'scholarship_available')


def _coerce_number(value):
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _assign(course: Course, data: dict) -> None:
    for field in EDITABLE_FIELDS:
        if field in data:
            value = data[field]
            if field == 'tuition':
                value = _coerce_number(value)
            elif field == 'weeks' and value is not None:
                value = str(value)
            setattr(course, field, value)


def update_average_cost(bootcamp_id: int) -> None:
    average = db.session.scalar(
        db.select(db.func.avg(Course.tuition)).where(Course.bootcamp_id == bootcamp_id)
    )
    bootcamp = db.session.get(Bootcamp, bootcamp_id)
    if bootcamp is None:
        return
    bootcamp.average_cost = math.ceil(average / 10) * 10 if average is not None else None
    db.session.commit()


def create_course(bootcamp: Bootcamp, data: dict, user: User) -> Course:
    course = Course(bootcamp_id=bootcamp.id, user_id=user.id)
    _assign(course, data)
    course.validate()
    db.session.add(course)
    db.session.commit()
    update_average_cost(bootcamp.id)
    current_app.logger.info(f'Course {course.id} added to bootcamp {bootcamp.id}')
    return course


def update_course(course: Course, data: dict) -> Course:
    _assign(course, data)
    course.validate()
    db.session.commit()
    update_average_cost(course.bootcamp_id)
    return course


def delete_course(course: Course) -> None:
    bootcamp_id = course.bootcamp_id
    db.session.delete(course)
    db.session.commit()
    update_average_cost(bootcamp_id)
