import pytest

from blog_api import create_app
from blog_api.config import TestingConfig
from blog_api.extensions import db
from blog_api.models import User


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    def _register(nome="Ana", email="ana@gmail.com", senha="123456"):
        return client.post("/api/usuarios", json={"nome": nome, "email": email, "senha": senha})
    return _register


@pytest.fixture
def user(register):
    register()
    return User.query.filter_by(email="ana@gmail.com").first()


@pytest.fixture
def token(client, user):
    resp = client.post("/api/login", json={"email": "ana@gmail.com", "senha": "123456"})
    return resp.get_json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
