"""Bootcamp model definition.
A bootcamp is published by one user and groups courses and reviews.
"""
from clock import utcnow
from errors import ValidationError
from extensions import db
from .user import EMAIL_PATTERN

CAREERS = (
    'Web Development',
    'Mobile Development',
    'UI/UX',
    'Data Science',
    'Business',
    'Other',
)

class Bootcamp(db.Model):
    __tablename__ = 'bootcamps'
    QUERY_FIELDS = {'user': 'user_id'}
    FLAG_FIELDS = ('housing', 'job_assistance', 'job_guarantee', 'accept_gi')

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), unique=True, nullable=False)
    slug = db.Column(db.String(80), index=True)
    description = db.Column(db.String(500), nullable=False)
    website = db.Column(db.String(255))
    phone = db.Column(db.String(20))
    email = db.Column(db.String(120))
    address = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=utcnow)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    # Geocoded location
    longitude = db.Column(db.Float)
    latitude = db.Column(db.Float)
    formatted_address = db.Column(db.String(255))
    street = db.Column(db.String(120))
    city = db.Column(db.String(80))
    state = db.Column(db.String(40))
    zipcode = db.Column(db.String(20))
    country = db.Column(db.String(40))

    careers = db.Column(db.JSON, nullable=False, default=list)
    average_rating = db.Column(db.Float)
    average_cost = db.Column(db.Integer)
    photo = db.Column(db.String(255), default='no-photo.jpg')
    housing = db.Column(db.Boolean, default=False)
    job_assistance = db.Column(db.Boolean, default=False)
    job_guarantee = db.Column(db.Boolean, default=False)
    accept_gi = db.Column(db.Boolean, default=False)

    # Relationships
    courses = db.relationship('Course', backref='bootcamp', cascade='all, delete-orphan')
    reviews = db.relationship('Review', backref='bootcamp', cascade='all, delete-orphan')

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def validate(self, require_address: bool = False) -> None:
        messages = []
        if not isinstance(self.name, str) or not self.name.strip():
            messages.append('Please add a name')
        elif len(self.name) > 50:
            messages.append('Name cannot be more than 50 characters')
        if not self.description:
            messages.append('Please add a description')
        elif not isinstance(self.description, str):
            messages.append('Description must be text')
        elif len(self.description) > 500:
            messages.append('Description cannot be longer than 500 characters')
        for field in ('website', 'phone', 'email', 'address'):
            if getattr(self, field) is not None and not isinstance(getattr(self, field), str):
                messages.append(f'{field.title()} must be text')
        if isinstance(self.phone, str) and len(self.phone) > 20:
            messages.append('Phone number cannot be longer than 20 characters')
        if isinstance(self.email, str) and self.email and not EMAIL_PATTERN.match(self.email):
            messages.append('Please add a valid email')
        if require_address and not self.address:
            messages.append('Please add an address')
        if not self.careers or not isinstance(self.careers, list):
            messages.append('Please add at least one career')
        else:
            invalid = [c for c in self.careers if c not in CAREERS]
            if invalid:
                messages.append(f'{", ".join(map(str, invalid))} is not a valid career')
        for field in self.FLAG_FIELDS:
            if getattr(self, field) is not None and not isinstance(getattr(self, field), bool):
                messages.append(f'{field} must be true or false')
        if self.average_rating is not None and not 1 <= self.average_rating <= 10:
            messages.append('Rating must be between 1 and 10')
        if messages:
            raise ValidationError.from_messages(messages)

    def location_dict(self):
        if not self.has_location:
            return None
        return {
            'type': 'Point',
            'coordinates': [self.longitude, self.latitude],
            'formatted_address': self.formatted_address,
            'street': self.street,
            'city': self.city,
            'state': self.state,
            'zipcode': self.zipcode,
            'country': self.country,
        }

    def to_dict(self, populate=False) -> dict:
        data = {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'website': self.website,
            'phone': self.phone,
            'email': self.email,
            'address': self.address,
            'location': self.location_dict(),
            'careers': list(self.careers or []),
            'average_rating': self.average_rating,
            'average_cost': self.average_cost,
            'photo': self.photo,
            'housing': self.housing,
            'job_assistance': self.job_assistance,
            'job_guarantee': self.job_guarantee,
            'accept_gi': self.accept_gi,
            'user': self.user_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
        if populate:
            data['courses'] = [course.to_dict() for course in sorted(self.courses, key=lambda c: c.id)]
        return data

    def summary(self) -> dict:
        return {'id': self.id, 'name': self.name, 'description': self.description}

    def __repr__(self) -> str:
        return f'<Bootcamp {self.name}>'
