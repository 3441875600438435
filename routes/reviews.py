from flask import Blueprint, jsonify, request

from extensions import db
from models import Bootcamp, Review
from routes.auth import authorize, json_body, protect
from services import review_service
from services.auth_service import ensure_owner
from services.query_service import advanced_results, get_by_id

# Mounted at /api/v1 so it can serve both /reviews and /bootcamps/<id>/reviews
reviews_bp = Blueprint('reviews', __name__)


@reviews_bp.route('/reviews', methods=['GET'])
def get_reviews():
    return jsonify(advanced_results(Review, request.args, populate=True))


@reviews_bp.route('/bootcamps/<bootcamp_id>/reviews', methods=['GET'])
def get_bootcamp_reviews(bootcamp_id):
    bootcamp = get_by_id(Bootcamp, bootcamp_id)
    statement = db.select(Review).where(Review.bootcamp_id == bootcamp.id)
    return jsonify(advanced_results(Review, request.args, statement=statement))


@reviews_bp.route('/reviews/<id>', methods=['GET'])
def get_review(id):
    review = get_by_id(Review, id)
    return jsonify({'success': True, 'data': review.to_dict(populate=True)})


@reviews_bp.route('/bootcamps/<bootcamp_id>/reviews', methods=['POST'])
@protect
@authorize('user', 'admin')
def add_review(bootcamp_id, current_user):
    bootcamp = get_by_id(Bootcamp, bootcamp_id)
    review = review_service.create_review(bootcamp, json_body(), current_user)
    return jsonify({'success': True, 'data': review.to_dict()}), 201


@reviews_bp.route('/reviews/<id>', methods=['PUT'])
@protect
@authorize('user', 'admin')
def update_review(id, current_user):
    review = get_by_id(Review, id)
    ensure_owner(review, current_user, 'update')
    review = review_service.update_review(review, json_body())
    return jsonify({'success': True, 'data': review.to_dict()})


@reviews_bp.route('/reviews/<id>', methods=['DELETE'])
@protect
@authorize('user', 'admin')
def delete_review(id, current_user):
    review = get_by_id(Review, id)
    ensure_owner(review, current_user, 'delete')
    review_service.delete_review(review)
    return jsonify({'success': True, 'data': {}})
