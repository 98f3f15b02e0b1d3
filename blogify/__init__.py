"""
Blogify - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, current_app
from blogify.extensions import db, login_manager
from blogify.config import Config
from blogify.middleware import MethodOverrideMiddleware


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.getLogger('blogify').setLevel(str(app.config['LOG_LEVEL']).upper())

    # Forms post with ?_method=PATCH / DELETE
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.signin'

    # Register blueprints
    from blogify.auth import auth_bp
    from blogify.blog import blog_bp
    from blogify.main import main_bp

    app.register_blueprint(auth_bp, url_prefix='/user')
    app.register_blueprint(blog_bp, url_prefix='/blog')
    app.register_blueprint(main_bp)

    # Identity is resolved from the signed cookie on every request
    @login_manager.request_loader
    def load_user_from_cookie(req):
        from blogify.services.identity import resolve_identity
        return resolve_identity(req.cookies.get(current_app.config['TOKEN_COOKIE_NAME']))

    from blogify.services.uploads import ensure_upload_folder
    ensure_upload_folder(app)

    # Create database tables
    with app.app_context():
        instance_dir = os.path.join(config_class.basedir, 'instance')
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///' + instance_dir):
            os.makedirs(instance_dir, exist_ok=True)
        db.create_all()

    return app
