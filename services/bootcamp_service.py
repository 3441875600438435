"""Bootcamp write paths and geographic lookups.

Slug generation and geocoding run explicitly on create and update instead of
in model hooks. Deleting a bootcamp removes its courses and reviews.
"""
import math
import os
import re
from typing import List

from flask import current_app
from werkzeug.utils import secure_filename

from errors import NotFound, ValidationError
from extensions import db
from models import Bootcamp, User
from services import geocoder

EARTH_RADIUS_MILES = 3963

EDITABLE_FIELDS = (
    'name', 'description', 'website', 'phone', 'email', 'address', 'careers',
    'housing', 'job_assistance', 'job_guarantee', 'accept_gi',
)


def slugify(value: str) -> str:
    value = re.sub(r'[^\w\s-]', '', value.lower())
    return re.sub(r'[\s_-]+', '-', value).strip('-')


def _apply_location(bootcamp: Bootcamp) -> None:
    result = geocoder.geocode(bootcamp.address)
    if result is None:
        return
    bootcamp.latitude = result.latitude
    bootcamp.longitude = result.longitude
    bootcamp.formatted_address = result.formatted_address
    bootcamp.street = result.street
    bootcamp.city = result.city
    bootcamp.state = result.state
    bootcamp.zipcode = result.zipcode
    bootcamp.country = result.country
    # The resolved location replaces the raw address
    bootcamp.address = None


def _assign(bootcamp: Bootcamp, data: dict) -> None:
    for field in EDITABLE_FIELDS:
        if field in data:
            setattr(bootcamp, field, data[field])


def create_bootcamp(data: dict, user: User) -> Bootcamp:
    bootcamp = Bootcamp(user_id=user.id)
    _assign(bootcamp, data)
    bootcamp.validate(require_address=True)
    bootcamp.slug = slugify(bootcamp.name)
    _apply_location(bootcamp)

    db.session.add(bootcamp)
    db.session.commit()
    current_app.logger.info(f'Bootcamp {bootcamp.id} created by user {user.id}')
    return bootcamp


def update_bootcamp(bootcamp: Bootcamp, data: dict) -> Bootcamp:
    _assign(bootcamp, data)
    bootcamp.validate()
    if 'name' in data:
        bootcamp.slug = slugify(bootcamp.name)
    if data.get('address'):
        _apply_location(bootcamp)
    db.session.commit()
    return bootcamp


def delete_bootcamp(bootcamp: Bootcamp) -> None:
    current_app.logger.info(f'Courses and reviews being removed from bootcamp {bootcamp.id}')
    db.session.delete(bootcamp)
    db.session.commit()


def _angular_distance(lat1, lng1, lat2, lng2) -> float:
    """Central angle in radians between two points (haversine)."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = math.radians(lng2 - lng1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * math.asin(min(1.0, math.sqrt(a)))


def bootcamps_within(latitude: float, longitude: float, distance_miles: float) -> List[Bootcamp]:
    """Bootcamps whose location lies within ``distance_miles`` of a point."""
    radius = distance_miles / EARTH_RADIUS_MILES
    candidates = Bootcamp.query.filter(
        Bootcamp.latitude.isnot(None), Bootcamp.longitude.isnot(None)
    ).order_by(Bootcamp.id).all()
    return [
        bootcamp for bootcamp in candidates
        if _angular_distance(latitude, longitude, bootcamp.latitude, bootcamp.longitude) <= radius
    ]


def bootcamps_in_radius(zipcode: str, distance) -> List[Bootcamp]:
    try:
        distance_miles = float(distance)
    except (TypeError, ValueError):
        raise ValidationError(f'Invalid distance: {distance}')
    if distance_miles < 0:
        raise ValidationError(f'Invalid distance: {distance}')

    location = geocoder.geocode(zipcode)
    if location is None:
        raise NotFound(f'Could not locate zipcode {zipcode}')
    return bootcamps_within(location.latitude, location.longitude, distance_miles)


def upload_photo(bootcamp: Bootcamp, file) -> str:
    """Store an uploaded image for ``bootcamp`` and return its file name."""
    if file is None or not file.filename:
        raise ValidationError('Please upload a file')
    if not (file.mimetype or '').startswith('image'):
        raise ValidationError('Please upload an image file')

    max_size = current_app.config['MAX_FILE_UPLOAD']
    file.stream.seek(0, os.SEEK_END)
    size = file.stream.tell()
    file.stream.seek(0)
    if size > max_size:
        raise ValidationError(f'Please upload an image less than {max_size} bytes')

    extension = os.path.splitext(secure_filename(file.filename))[1]
    filename = f'photo_{bootcamp.id}{extension}'
    folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(folder, exist_ok=True)
    file.save(os.path.join(folder, filename))

    bootcamp.photo = filename
    db.session.commit()
    current_app.logger.info(f'Photo {filename} uploaded for bootcamp {bootcamp.id}')
    return filename
