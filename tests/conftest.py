import os
import sys
import pytest

# Add project root to path so `app` and `config` import without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app, db
from config import TestConfig


GREEN_VALLEY = {
    "name": "Green Valley High",
    "address": "123 Oak Street",
    "city": "Springfield",
    "state": "IL",
    "contact": "1234567890",
    "email_id": "info@gvh.edu",
    "image": "",
}


class RecordingStorage:
    def __init__(self, error=None):
        self.records = []
        self.error = error

    def add_school(self, record):
        if self.error is not None:
            raise self.error
        self.records.append(record)

    def get_schools(self):
        return list(self.records)


class RecordingNotifier:
    def __init__(self):
        self.successes = []
        self.errors = []

    def notify_success(self, message):
        self.successes.append(message)

    def notify_error(self, message):
        self.errors.append(message)


class RecordingNavigator:
    def __init__(self):
        self.routes = []

    def go_to(self, route):
        self.routes.append(route)


class ImmediateScheduler:
    def __init__(self):
        self.delays = []

    def __call__(self, delay, callback):
        self.delays.append(delay)
        callback()


@pytest.fixture()
def school_data():
    return dict(GREEN_VALLEY)


@pytest.fixture()
def storage():
    return RecordingStorage()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def navigator():
    return RecordingNavigator()


@pytest.fixture()
def scheduler():
    return ImmediateScheduler()


@pytest.fixture()
def app():
    a = create_app(TestConfig)
    yield a
    with a.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def storage_class():
    return RecordingStorage
