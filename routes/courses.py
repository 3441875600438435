from flask import Blueprint, jsonify, request

from errors import ValidationError
from extensions import db
from models import Bootcamp, Course
from routes.auth import authorize, json_body, protect
from services import course_service
from services.auth_service import ensure_owner
from services.query_service import advanced_results, get_by_id

# Mounted at /api/v1 so it can serve both /courses and /bootcamps/<id>/courses
courses_bp = Blueprint('courses', __name__)


@courses_bp.route('/courses', methods=['GET'])
def get_courses():
    return jsonify(advanced_results(Course, request.args, populate=True))


@courses_bp.route('/bootcamps/<bootcamp_id>/courses', methods=['GET'])
def get_bootcamp_courses(bootcamp_id):
    bootcamp = get_by_id(Bootcamp, bootcamp_id)
    statement = db.select(Course).where(Course.bootcamp_id == bootcamp.id)
    return jsonify(advanced_results(Course, request.args, statement=statement))


@courses_bp.route('/courses/<id>', methods=['GET'])
def get_course(id):
    course = get_by_id(Course, id)
    return jsonify({'success': True, 'data': course.to_dict(populate=True)})


def _add_course(bootcamp_id, data, current_user):
    bootcamp = get_by_id(Bootcamp, bootcamp_id)
    ensure_owner(bootcamp, current_user, 'add a course to')
    course = course_service.create_course(bootcamp, data, current_user)
    return jsonify({'success': True, 'data': course.to_dict()}), 201


@courses_bp.route('/bootcamps/<bootcamp_id>/courses', methods=['POST'])
@protect
@authorize('publisher', 'admin')
def add_bootcamp_course(bootcamp_id, current_user):
    return _add_course(bootcamp_id, json_body(), current_user)


@courses_bp.route('/courses', methods=['POST'])
@protect
@authorize('publisher', 'admin')
def add_course(current_user):
    data = json_body()
    if data.get('bootcamp_id') is None:
        raise ValidationError('Please add a bootcamp')
    return _add_course(data['bootcamp_id'], data, current_user)


@courses_bp.route('/courses/<id>', methods=['PUT'])
@protect
@authorize('publisher', 'admin')
def update_course(id, current_user):
    course = get_by_id(Course, id)
    ensure_owner(course, current_user, 'update')
    course = course_service.update_course(course, json_body())
    return jsonify({'success': True, 'data': course.to_dict()})


@courses_bp.route('/courses/<id>', methods=['DELETE'])
@protect
@authorize('publisher', 'admin')
def delete_course(id, current_user):
    course = get_by_id(Course, id)
    ensure_owner(course, current_user, 'delete')
    course_service.delete_course(course)
    return jsonify({'success': True, 'data': {}})
