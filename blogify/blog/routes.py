"""
Blog Routes

Create, view, edit and delete blogs, and comment on them.
"""

from flask import render_template, request, redirect, url_for, jsonify
from flask_login import login_required
from blogify.blog import blog_bp
from blogify.models import Comment
from blogify.services import (
    blogs, comments, current_identity, save_cover_image, remove_cover_image, InvalidIdError, UploadError
)


def blog_not_found():
    return jsonify(message='Blog not found'), 404


@blog_bp.errorhandler(InvalidIdError)
def handle_invalid_id(error):
    return jsonify(message='Invalid id'), 400


@blog_bp.errorhandler(UploadError)
def handle_upload_error(error):
    return jsonify(message=str(error)), 400


@blog_bp.route('/add-new')
@login_required
def add_new():
    """Render the new blog form"""
    return render_template('blog/add_blog.html', user=current_identity())


@blog_bp.route('/<blog_id>/edit')
def edit(blog_id):
    """Render the edit form for an existing blog"""
    blog = blogs.find_by_id(blog_id)
    if blog is None:
        return blog_not_found()

    return render_template('blog/edit_blog.html', user=current_identity(), blog=blog)


@blog_bp.route('/<blog_id>')
def detail(blog_id):
    """Blog detail page with its comments"""
    blog = blogs.find_by_id(blog_id, populate=('created_by',))
    if blog is None:
        return blog_not_found()

    blog_comments = comments.find_many(populate=('created_by',),
                                       order_by=Comment.created_at,
                                       blog_id=blog_id)
    return render_template('blog/blog.html',
                           user=current_identity(),
                           blog=blog,
                           comments=blog_comments)


@blog_bp.route('/comment/<blog_id>', methods=['POST'])
@login_required
def add_comment(blog_id):
    """Add a comment to a blog"""
    if blogs.find_by_id(blog_id) is None:
        return blog_not_found()

    comments.create(content=request.form.get('content', ''),
                    blog_id=blog_id,
                    created_by_id=current_identity().id)
    return redirect(url_for('blog.detail', blog_id=blog_id))


@blog_bp.route('', methods=['POST'])
@login_required
def create():
    """Create a blog; a cover image is required"""
    upload = save_cover_image(request.files.get('coverImage'))
    if upload is None:
        return jsonify(message='Cover image is required'), 400

    cover_image_url, cover_image_name = upload
    try:
        blog = blogs.create(title=request.form.get('title', ''),
                            body=request.form.get('body', ''),
                            cover_image_url=cover_image_url,
                            cover_image_name=cover_image_name,
                            created_by_id=current_identity().id)
    except Exception:
        remove_cover_image(cover_image_url)
        raise
    return redirect(url_for('blog.detail', blog_id=blog.id))


@blog_bp.route('/<blog_id>', methods=['PATCH'])
def update(blog_id):
    """Partially update a blog; only supplied fields change"""
    # Validate before touching the disk
    if blogs.find_by_id(blog_id) is None:
        return blog_not_found()

    update_data = {}
    title = request.form.get('title')
    body = request.form.get('body')
    if title:
        update_data['title'] = title
    if body:
        update_data['body'] = body

    upload = save_cover_image(request.files.get('coverImage'))
    if upload:
        update_data['cover_image_url'], update_data['cover_image_name'] = upload

    try:
        blog = blogs.update_by_id(blog_id, **update_data)
    except Exception:
        if upload:
            remove_cover_image(upload[0])
        raise

    if blog is None:
        return blog_not_found()

    return redirect(url_for('blog.detail', blog_id=blog.id))


@blog_bp.route('/<blog_id>', methods=['DELETE'])
@blog_bp.route('/<blog_id>/delete', methods=['POST'])
def delete(blog_id):
    """Delete a blog; deleting an absent blog is not an error"""
    blogs.delete_by_id(blog_id)
    return redirect(url_for('main.index'))
