from itsdangerous import URLSafeTimedSerializer

from blogify.services import issue_token, resolve_identity, users, blogs


def _make_user(full_name='Ada Lovelace', email='ada@example.com'):
    return users.create(full_name=full_name, email=email, password_hash='x')


def test_valid_token_resolves_to_user(app):
    with app.app_context():
        user = _make_user()
        resolved = resolve_identity(issue_token(user))
        assert resolved is not None
        assert resolved.id == user.id


def test_missing_token_is_anonymous(app):
    with app.app_context():
        assert resolve_identity(None) is None
        assert resolve_identity('') is None


def test_garbage_token_is_anonymous(app):
    with app.app_context():
        assert resolve_identity('garbage') is None
        assert resolve_identity('a.b.c') is None


def test_token_signed_with_other_key_is_anonymous(app):
    with app.app_context():
        user = _make_user()
        forged = URLSafeTimedSerializer('someone-elses-key', salt=app.config['TOKEN_SALT']).dumps(
            {'id': user.id, 'email': user.email, 'full_name': user.full_name})
        assert resolve_identity(forged) is None


def test_expired_token_is_anonymous(app):
    with app.app_context():
        user = _make_user()
        token = issue_token(user)
        app.config['TOKEN_MAX_AGE'] = -1
        assert resolve_identity(token) is None


def test_token_for_deleted_user_is_anonymous(app):
    with app.app_context():
        user = _make_user()
        token = issue_token(user)
        users.delete_by_id(user.id)
        assert resolve_identity(token) is None


def test_malformed_claims_are_anonymous(app):
    with app.app_context():
        serializer = URLSafeTimedSerializer(app.config['SECRET_KEY'], salt=app.config['TOKEN_SALT'])
        assert resolve_identity(serializer.dumps('just-a-string')) is None
        assert resolve_identity(serializer.dumps({'id': '../etc/passwd'})) is None
        assert resolve_identity(serializer.dumps({'email': 'ada@example.com'})) is None


def test_token_for_deleted_user_cannot_create_blog(app, client):
    with app.app_context():
        user = _make_user()
        token = issue_token(user)
        users.delete_by_id(user.id)

    client.set_cookie('token', token)
    r = client.get('/blog/add-new')
    assert r.status_code == 302
    assert '/user/signin' in r.headers['Location']
    with app.app_context():
        assert blogs.find_many() == []
