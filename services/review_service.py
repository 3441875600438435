"""Review write paths.

Every write recomputes the reviewed bootcamp's average rating. The
one-review-per-user-per-bootcamp rule is enforced by a unique constraint and
surfaces as a Conflict through the error translator.
"""
from flask import current_app

from extensions import db
from models import Bootcamp, Review, User

EDITABLE_FIELDS = ('title', 'text', 'rating')


def _assign(review: Review, data: dict) -> None:
    for field in EDITABLE_FIELDS:
        if field in data:
            value = data[field]
            if field == 'rating' and isinstance(value, float) and value.is_integer():
                value = int(value)
            setattr(review, field, value)


def update_average_rating(bootcamp_id: int) -> None:
    average = db.session.scalar(
        db.select(db.func.avg(Review.rating)).where(Review.bootcamp_id == bootcamp_id)
    )
    bootcamp = db.session.get(Bootcamp, bootcamp_id)
    if bootcamp is None:
        return
    bootcamp.average_rating = float(average) if average is not None else None
    db.session.commit()


def create_review(bootcamp: Bootcamp, data: dict, user: User) -> Review:
    review = Review(bootcamp_id=bootcamp.id, user_id=user.id)
    _assign(review, data)
    review.validate()
    db.session.add(review)
    db.session.commit()
    update_average_rating(bootcamp.id)
    current_app.logger.info(f'Review {review.id} added to bootcamp {bootcamp.id} by user {user.id}')
    return review


def update_review(review: Review, data: dict) -> Review:
    _assign(review, data)
    review.validate()
    db.session.commit()
    update_average_rating(review.bootcamp_id)
    return review


def delete_review(review: Review) -> None:
    bootcamp_id = review.bootcamp_id
    db.session.delete(review)
    db.session.commit()
    update_average_rating(bootcamp_id)
