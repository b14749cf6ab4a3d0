"""Pytest configuration and fixtures."""
import copy

import pytest

from dashboard import create_app
from dashboard.application.users.ensure_admin import ensure_admin_user
from dashboard.client.errors import NotFound
from dashboard.extensions import db

FIXED_NOW = 1_700_000_000_000


@pytest.fixture
def app(tmp_path):
    """Flask app on an in-memory database with the operator account seeded."""
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        db.create_all()
        ensure_admin_user(
            username=app.config["ADMIN_USERNAME"],
            password=app.config["ADMIN_PASSWORD"],
        )
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client, app):
    response = client.post(
        "/api/login",
        json={"username": app.config["ADMIN_USERNAME"], "password": app.config["ADMIN_PASSWORD"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


class FakeGateway:
    """In-memory persistence gateway recording every write."""

    def __init__(self, document=None):
        self.document = copy.deepcopy(document)
        self.saved = []
        self.uploaded = []
        self.fetch_error = None
        self.save_error = None
        self.upload_error = None

    async def fetch_document(self):
        if self.fetch_error:
            raise self.fetch_error
        if self.document is None:
            raise NotFound("No content found")
        return copy.deepcopy(self.document)

    async def save_document(self, document):
        if self.save_error:
            raise self.save_error
        self.saved.append(copy.deepcopy(document))
        self.document = copy.deepcopy(document)
        return copy.deepcopy(document)

    async def upload_assets(self, files):
        if self.upload_error:
            raise self.upload_error
        self.uploaded.extend(files)
        return [f"https://cdn.example.com/{name}" for name, _, _ in files]


@pytest.fixture
def gateway():
    return FakeGateway()
