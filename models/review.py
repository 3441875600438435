"""Review model definition.
A user may review each bootcamp at most once.
"""
from clock import utcnow
from errors import ValidationError
from extensions import db

class Review(db.Model):
    __tablename__ = 'reviews'
    __table_args__ = (
        db.UniqueConstraint('bootcamp_id', 'user_id', name='uq_review_bootcamp_user'),
    )
    QUERY_FIELDS = {'user': 'user_id', 'bootcamp': 'bootcamp_id'}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    text = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    bootcamp_id = db.Column(db.Integer, db.ForeignKey('bootcamps.id'), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    def validate(self) -> None:
        messages = []
        if not isinstance(self.title, str) or not self.title.strip():
            messages.append('Please add a title for the review')
        elif len(self.title) > 100:
            messages.append('Title cannot be more than 100 characters')
        if not self.text or not isinstance(self.text, str):
            messages.append('Please add some text')
        if (self.rating is None or isinstance(self.rating, bool)
                or not isinstance(self.rating, int) or not 1 <= self.rating <= 10):
            messages.append('Please add a rating between 1 and 10')
        if messages:
            raise ValidationError.from_messages(messages)

    def to_dict(self, populate=False) -> dict:
        data = {
            'id': self.id,
            'title': self.title,
            'text': self.text,
            'rating': self.rating,
            'bootcamp': self.bootcamp_id,
            'user': self.user_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
        if populate and self.bootcamp is not None:
            data['bootcamp'] = self.bootcamp.summary()
        return data

    def __repr__(self) -> str:
        return f'<Review {self.bootcamp_id} by {self.user_id}: {self.rating}>'
