"""Course model definition.
Courses belong to a bootcamp and drive its average cost.
"""
from clock import utcnow
from errors import ValidationError
from extensions import db

SKILL_LEVELS = ('beginner', 'intermediate', 'advanced')

class Course(db.Model):
    __tablename__ = 'courses'

    # Serialized names accepted by query-string filters and sorts
    QUERY_FIELDS = {'user': 'user_id', 'bootcamp': 'bootcamp_id'}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=False)
    weeks = db.Column(db.String(20), nullable=False)
    tuition = db.Column(db.Float, nullable=False)
    minimum_skill = db.Column(db.String(20), nullable=False)
    scholarship_available = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    bootcamp_id = db.Column(db.Integer, db.ForeignKey('bootcamps.id'), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    def validate(self) -> None:
        messages = []
        if not isinstance(self.title, str) or not self.title.strip():
            messages.append('Please add a course title')
        if not self.description or not isinstance(self.description, str):
            messages.append('Please add a description')
        if self.weeks is None or str(self.weeks).strip() == '':
            messages.append('Please add number of weeks')
        if self.tuition is None:
            messages.append('Please add a tuition cost')
        elif isinstance(self.tuition, bool) or not isinstance(self.tuition, (int, float)):
            messages.append('Tuition must be a number')
        if not self.minimum_skill:
            messages.append('Please add a minimum skill')
        elif not isinstance(self.minimum_skill, str) or self.minimum_skill not in SKILL_LEVELS:
            messages.append(f'{self.minimum_skill} is not a valid skill level')
        if self.scholarship_available is not None and not isinstance(self.scholarship_available, bool):
            messages.append('scholarship_available must be true or false')
        if messages:
            raise ValidationError.from_messages(messages)

    def to_dict(self, populate=False) -> dict:
        data = {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'weeks': self.weeks,
            'tuition': self.tuition,
            'minimum_skill': self.minimum_skill,
            'scholarship_available': self.scholarship_available,
            'bootcamp': self.bootcamp_id,
            'user': self.user_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
        if populate and self.bootcamp is not None:
            data['bootcamp'] = self.bootcamp.summary()
        return data

    def __repr__(self) -> str:
        return f'<Course {self.title}>'
