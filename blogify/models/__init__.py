"""
Models Package

Exports all models for easy importing.
"""

from blogify.models.user import User
from blogify.models.blog import Blog
from blogify.models.comment import Comment

__all__ = ['User', 'Blog', 'Comment']
