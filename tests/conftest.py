import io

import pytest

from blogify import create_app
from blogify.config import TestConfig
from blogify.extensions import db
from blogify.services import users

PASSWORD = 'secret-pass'


@pytest.fixture()
def app(tmp_path):
    class _TestConfig(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    app = create_app(_TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def sign_up_and_in(client, email='ada@example.com', full_name='Ada Lovelace'):
    client.post('/user/signup', data={'full_name': full_name, 'email': email, 'password': PASSWORD})
    r = client.post('/user/signin', data={'email': email, 'password': PASSWORD})
    assert r.status_code == 302


def user_id_for(app, email):
    with app.app_context():
        return users.find_many(email=email)[0].id


@pytest.fixture()
def author_client(app):
    """Client signed in as ada@example.com"""
    client = app.test_client()
    sign_up_and_in(client)
    return client


def create_blog(client, title='T', body='B', filename='cover.png', content=b'fake-png-bytes'):
    """POST a new blog and return its id from the redirect."""
    r = client.post('/blog',
                    data={'title': title, 'body': body, 'coverImage': (io.BytesIO(content), filename)},
                    content_type='multipart/form-data')
    assert r.status_code == 302
    return r.headers['Location'].rsplit('/', 1)[-1]
