"""
Comment Model
"""

from datetime import datetime

from blogify.extensions import db
from blogify.models.user import generate_id


class Comment(db.Model):
    """Comment left by a user on a blog"""
    __tablename__ = 'comments'

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    content = db.Column(db.Text, nullable=False)
    # Weak reference: comments outlive the blog they point at
    blog_id = db.Column(db.String(32), nullable=False, index=True)
    created_by_id = db.Column(db.String(32), db.ForeignKey('users.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    created_by = db.relationship('User', lazy='select')

    def __repr__(self):
        return f'<Comment Blog:{self.blog_id}>'
