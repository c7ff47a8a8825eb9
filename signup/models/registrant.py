"""
Registrant Model
"""

from datetime import datetime, timezone

from signup.extensions import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Registrant(db.Model):
    """A person who submitted the signup form"""
    __tablename__ = 'registrants'

    id = db.Column(db.Integer, primary_key=True)
    fullname = db.Column(db.String(200), nullable=False)
    # Uniqueness is checked before insert, not by the database.
    email = db.Column(db.String(255), nullable=False, index=True)
    phone = db.Column(db.String(50), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'fullname': self.fullname,
            'email': self.email,
            'phone': self.phone,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Registrant {self.email}>'
