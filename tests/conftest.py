import json

import pytest

from dataset import Dataset
from main import create_app


PORTS = [
    {"code": "CNSHA", "name": "Shanghai", "country": "CN"},
    {"code": "CNSZX", "name": "Shenzhen", "country": "CN"},
    {"code": "SGSIN", "name": "Singapore", "country": "SG"},
    {"code": "INBOM", "name": "Mumbai", "country": "IN"},
    {"code": "INNSA", "name": "Nhava Sheva", "country": "IN"},
    {"code": "KRPUS", "name": "Busan", "country": "KR"},
]


@pytest.fixture
def dataset():
    return Dataset.from_rows(PORTS)


@pytest.fixture
def app(dataset):
    """Flask app over the in-memory port list."""
    app = create_app({
        "TESTING": True,
        "DATASET": dataset,
        "RATES_BACKEND_URL": "http://rates.test",
    })
    yield app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture
def write_json(tmp_path):
    """Write an object as JSON under tmp_path and return the path."""
    def _write(obj, name="ports.json"):
        p = tmp_path / name
        p.write_text(json.dumps(obj), encoding="utf-8")
        return p
    return _write
