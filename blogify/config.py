"""
Configuration settings for Blogify
"""
import os


class Config:
    """Flask application configuration"""

    # Secret key used for signing identity tokens (CHANGE THIS IN PRODUCTION!)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blogify.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Cover image uploads, served back under UPLOAD_URL_PREFIX
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'public', 'uploads')
    UPLOAD_URL_PREFIX = '/uploads'
    ALLOWED_COVER_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.webp'}
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024

    # Identity cookie
    TOKEN_COOKIE_NAME = 'token'
    TOKEN_SALT = 'blogify-auth-token'
    TOKEN_MAX_AGE = int(os.environ.get('TOKEN_MAX_AGE') or 7 * 24 * 3600)

    LOG_LEVEL = (os.environ.get('LOG_LEVEL') or 'INFO').upper()


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
