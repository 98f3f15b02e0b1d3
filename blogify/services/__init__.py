"""
Services Package

Exports all services for easy importing.
"""

from blogify.services.store import DocumentStore, InvalidIdError, users, blogs, comments
from blogify.services.uploads import UploadError, save_cover_image, remove_cover_image, ensure_upload_folder
from blogify.services.identity import issue_token, resolve_identity, current_identity

__all__ = [
    'DocumentStore',
    'InvalidIdError',
    'users',
    'blogs',
    'comments',
    'UploadError',
    'save_cover_image',
    'remove_cover_image',
    'ensure_upload_folder',
    'issue_token',
    'resolve_identity',
    'current_identity'
]
