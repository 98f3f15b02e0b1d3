"""
Blog Blueprint
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__)

from blogify.blog import routes  # noqa: E402, F401
