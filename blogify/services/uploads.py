"""
Upload Service

Stores blog cover images on local disk under a generated name. The
client-supplied filename only contributes its extension.
"""

import logging
import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """Raised when an uploaded file cannot be accepted."""


def ensure_upload_folder(app):
    """Create the upload directory if it does not exist yet."""
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)


def cover_extension(filename):
    """Sanitized, lower-cased extension of ``filename`` (e.g. ``'.png'``)."""
    _, ext = os.path.splitext(secure_filename(filename or ''))
    ext = ext.lower()
    if ext not in current_app.config['ALLOWED_COVER_EXTENSIONS']:
        raise UploadError(f'Unsupported cover image type: {ext or "none"}')
    return ext


def save_cover_image(file_storage):
    """Save an uploaded cover image.

    Args:
        file_storage: werkzeug ``FileStorage`` from ``request.files`` or None

    Returns:
        ``(url_path, original_name)`` tuple, or None when no file was sent
    """
    if file_storage is None or not file_storage.filename:
        return None

    original_name = file_storage.filename
    stored_name = uuid.uuid4().hex + cover_extension(original_name)
    destination = os.path.join(current_app.config['UPLOAD_FOLDER'], stored_name)
    file_storage.save(destination)

    url_path = f"{current_app.config['UPLOAD_URL_PREFIX']}/{stored_name}"
    logger.info("Stored cover image %r as %s", original_name, url_path)
    return url_path, original_name


def remove_cover_image(url_path):
    """Delete a stored cover image by the path ``save_cover_image`` returned."""
    stored_name = url_path.rsplit('/', 1)[-1]
    path = os.path.join(current_app.config['UPLOAD_FOLDER'], stored_name)
    if os.path.exists(path):
        os.remove(path)
        logger.info("Removed cover image %s", url_path)
