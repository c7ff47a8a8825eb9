"""
Admin Credential Model
"""

from werkzeug.security import check_password_hash

from signup.extensions import db


class AdminCredential(db.Model):
    """Username/password pair authorized to view the admin panel"""
    __tablename__ = 'admin_credentials'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_session(self):
        """Record bound into the session on login (never the hash)."""
        return {'id': self.id, 'username': self.username}

    def __repr__(self):
        return f'<AdminCredential {self.username}>'
