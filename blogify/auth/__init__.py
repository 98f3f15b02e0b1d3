"""
Auth Blueprint

Sign-up, sign-in and sign-out. Signing in issues the signed ``token``
cookie that the identity request loader reads on every request.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blogify.auth import routes  # noqa: E402, F401
