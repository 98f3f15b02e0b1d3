"""
Main Routes
"""

from flask import current_app, render_template, send_from_directory
from blogify.main import main_bp
from blogify.models import Blog
from blogify.services import blogs, current_identity


@main_bp.route('/')
def index():
    """Home page listing every blog"""
    all_blogs = blogs.find_many(order_by=Blog.created_at.desc())
    return render_template('home.html', user=current_identity(), blogs=all_blogs)


@main_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Serve a stored cover image"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
