from flask import Blueprint, jsonify, request

from models import Bootcamp
from routes.auth import authorize, json_body, protect
from services import bootcamp_service
from services.auth_service import ensure_owner
from services.query_service import advanced_results, get_by_id

bootcamps_bp = Blueprint('bootcamps', __name__)


@bootcamps_bp.route('', methods=['GET'])
def get_bootcamps():
    return jsonify(advanced_results(Bootcamp, request.args, populate=True))


@bootcamps_bp.route('/<id>', methods=['GET'])
def get_bootcamp(id):
    bootcamp = get_by_id(Bootcamp, id)
    return jsonify({'success': True, 'data': bootcamp.to_dict(populate=True)})


@bootcamps_bp.route('', methods=['POST'])
@protect
@authorize('publisher', 'admin')
def create_bootcamp(current_user):
    bootcamp = bootcamp_service.create_bootcamp(json_body(), current_user)
    return jsonify({'success': True, 'data': bootcamp.to_dict()}), 201


@bootcamps_bp.route('/<id>', methods=['PUT'])
@protect
@authorize('publisher', 'admin')
def update_bootcamp(id, current_user):
    bootcamp = get_by_id(Bootcamp, id)
    ensure_owner(bootcamp, current_user, 'update')
    bootcamp = bootcamp_service.update_bootcamp(bootcamp, json_body())
    return jsonify({'success': True, 'data': bootcamp.to_dict()})


@bootcamps_bp.route('/<id>', methods=['DELETE'])
@protect
@authorize('publisher', 'admin')
def delete_bootcamp(id, current_user):
    bootcamp = get_by_id(Bootcamp, id)
    ensure_owner(bootcamp, current_user, 'delete')
    bootcamp_service.delete_bootcamp(bootcamp)
    return jsonify({'success': True, 'data': {}})


@bootcamps_bp.route('/radius/<zipcode>/<distance>', methods=['GET'])
def get_bootcamps_in_radius(zipcode, distance):
    bootcamps = bootcamp_service.bootcamps_in_radius(zipcode, distance)
    return jsonify({
        'success': True,
        'count': len(bootcamps),
        'data': [bootcamp.to_dict() for bootcamp in bootcamps]
    })


@bootcamps_bp.route('/<id>/photo', methods=['PUT'])
@protect
@authorize('publisher', 'admin')
def bootcamp_photo_upload(id, current_user):
    bootcamp = get_by_id(Bootcamp, id)
    ensure_owner(bootcamp, current_user, 'update')
    filename = bootcamp_service.upload_photo(bootcamp, request.files.get('file'))
    return jsonify({'success': True, 'data': filename})
