"""User model definition.
This module defines the User ORM model and any user-related helper methods.
"""
import re

from clock import utcnow
from errors import ValidationError
from extensions import db, bcrypt

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

ROLES = ('user', 'publisher', 'admin')

class User(db.Model):
    __tablename__ = 'users'

    # Never exposed through serialization or query-string filtering
    HIDDEN_FIELDS = ('password_hash', 'reset_password_token', 'reset_password_expire')

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    role = db.Column(db.String(20), nullable=False, default='user')
    password_hash = db.Column(db.String(128), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    # Password reset (only the sha256 digest of the token is stored)
    reset_password_token = db.Column(db.String(64), index=True)
    reset_password_expire = db.Column(db.DateTime)

    # Relationships
    bootcamps = db.relationship('Bootcamp', backref='owner', cascade='all, delete-orphan')
    courses = db.relationship('Course', backref='owner', cascade='all, delete-orphan')
    reviews = db.relationship('Review', backref='author', cascade='all, delete-orphan')

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def clear_reset_token(self):
        self.reset_password_token = None
        self.reset_password_expire = None

    def validate(self, password=None):
        """Raise ValidationError listing every violated field rule."""
        messages = []
        if not isinstance(self.name, str) or not self.name.strip():
            messages.append('Please add a name')
        if not self.email:
            messages.append('Please add an email')
        elif not isinstance(self.email, str) or not EMAIL_PATTERN.match(self.email):
            messages.append('Please add a valid email')
        if self.role not in ROLES:
            messages.append(f'{self.role} is not a valid role')
        if password is not None:
            if not password or not isinstance(password, str):
                messages.append('Please add a password')
            elif len(password) < 6:
                messages.append('Password must be at least 6 characters long')
        if messages:
            raise ValidationError.from_messages(messages)

    def to_dict(self, populate=False):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<User {self.email}>'
