"""
Main Blueprint

Home page listing and uploaded cover images.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from blogify.main import routes  # noqa: E402, F401
