"""
Identity Service

Issues and resolves the signed identity token carried in the ``token``
cookie. Resolution never raises: anything that does not verify is treated
as an anonymous request.
"""

import logging

from flask import current_app
from flask_login import current_user
from itsdangerous import BadSignature, URLSafeTimedSerializer
from blogify.services.store import users, InvalidIdError

logger = logging.getLogger(__name__)


def _serializer():
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'],
                                  salt=current_app.config['TOKEN_SALT'])


def issue_token(user):
    """Sign an identity claim for ``user``."""
    claim = {'id': user.id, 'email': user.email, 'full_name': user.full_name}
    return _serializer().dumps(claim)


def resolve_identity(token):
    """Decode ``token`` into a User, or None for anonymous."""
    if not token:
        return None

    try:
        claim = _serializer().loads(token, max_age=current_app.config['TOKEN_MAX_AGE'])
    except BadSignature as e:
        # Covers SignatureExpired as well
        logger.debug("Rejected identity token: %s", e)
        return None

    if not isinstance(claim, dict):
        logger.debug("Identity token carried a non-object claim")
        return None

    try:
        user = users.find_by_id(claim.get('id'))
    except InvalidIdError:
        logger.debug("Identity token carried a malformed user id")
        return None

    if user is None:
        logger.debug("Identity token names an unknown user %s", claim.get('id'))
    return user


def current_identity():
    """The signed-in User for this request, or None when anonymous."""
    if current_user.is_authenticated:
        return current_user._get_current_object()
    return None
