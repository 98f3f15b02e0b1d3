"""
Blog Model
"""

from datetime import datetime

from blogify.extensions import db
from blogify.models.user import generate_id


class Blog(db.Model):
    """A blog post with a cover image"""
    __tablename__ = 'blogs'

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    title = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    cover_image_url = db.Column(db.String(255), nullable=False)
    # Client-supplied filename, metadata only
    cover_image_name = db.Column(db.String(255))
    created_by_id = db.Column(db.String(32), db.ForeignKey('users.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    created_by = db.relationship('User', lazy='select')

    def __repr__(self):
        return f'<Blog {self.title}>'
