from flask import Blueprint, jsonify, request

from models import User
from routes.auth import authorize, json_body, protect
from services import user_service
from services.query_service import advanced_results, get_by_id

users_bp = Blueprint('users', __name__)


@users_bp.route('', methods=['GET'])
@protect
@authorize('admin')
def get_users(current_user):
    return jsonify(advanced_results(User, request.args))


@users_bp.route('/<id>', methods=['GET'])
@protect
@authorize('admin')
def get_user(id, current_user):
    user = get_by_id(User, id)
    return jsonify({'success': True, 'data': user.to_dict()})


@users_bp.route('', methods=['POST'])
@protect
@authorize('admin')
def create_user(current_user):
    data = json_body()
    user = user_service.create_user(
        name=data.get('name'),
        email=data.get('email'),
        password=data.get('password'),
        role=data.get('role')
    )
    return jsonify({'success': True, 'data': user.to_dict()}), 201


@users_bp.route('/<id>', methods=['PUT'])
@protect
@authorize('admin')
def update_user(id, current_user):
    user = get_by_id(User, id)
    user = user_service.update_user(user, json_body())
    return jsonify({'success': True, 'data': user.to_dict()})


@users_bp.route('/<id>', methods=['DELETE'])
@protect
@authorize('admin')
def delete_user(id, current_user):
    user = get_by_id(User, id)
    user_service.delete_user(user)
    return jsonify({'success': True, 'data': {}})
