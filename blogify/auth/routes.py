"""
Auth Routes

User sign-up, sign-in and sign-out using a signed identity cookie.
"""

import logging

from flask import current_app, render_template, request, redirect, url_for
from werkzeug.security import generate_password_hash, check_password_hash
from blogify.auth import auth_bp
from blogify.services import users, issue_token

logger = logging.getLogger(__name__)


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """User registration route"""
    if request.method == 'POST':
        full_name = request.form.get('full_name', '').strip()
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        # Validation
        if not full_name:
            return render_template('user/signup.html', error='Full name is required.')

        if not email or '@' not in email:
            return render_template('user/signup.html', error='Please provide a valid email address.')

        if not password or len(password) < 6:
            return render_template('user/signup.html', error='Password must be at least 6 characters long.')

        if users.find_many(email=email):
            return render_template('user/signup.html', error='Email already registered.')

        hashed_password = generate_password_hash(password, method='pbkdf2:sha256')
        users.create(full_name=full_name, email=email, password_hash=hashed_password)
        return redirect(url_for('auth.signin'))

    return render_template('user/signup.html')


@auth_bp.route('/signin', methods=['GET', 'POST'])
def signin():
    """User sign-in route; sets the identity cookie on success"""
    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        matches = users.find_many(email=email) if email else []
        user = matches[0] if matches else None

        if user is None or not check_password_hash(user.password_hash, password):
            logger.info("Failed sign-in for %r", email)
            return render_template('user/signin.html', error='Incorrect email or password')

        response = redirect(url_for('main.index'))
        response.set_cookie(current_app.config['TOKEN_COOKIE_NAME'],
                            issue_token(user),
                            max_age=current_app.config['TOKEN_MAX_AGE'],
                            httponly=True,
                            samesite='Lax')
        return response

    return render_template('user/signin.html')


@auth_bp.route('/logout')
def logout():
    """Clear the identity cookie"""
    response = redirect(url_for('main.index'))
    response.delete_cookie(current_app.config['TOKEN_COOKIE_NAME'])
    return response
