import os

# Select the in-memory backend before the app settings are imported
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SIMULATED_LATENCY_MS"] = "0"
os.environ["ADMIN_RECIPIENT_ID"] = "admin-1"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app.config.backends import MemoryBackend
from app.config.store import Store, set_store
from app.main import app
from app.services import reset_services
from app.services.alert_service import AlertService
from app.services.form_service import FormService
from app.services.message_service import MessageService
from app.services.notification_service import NotificationService
from app.utils.clock import utc_now


class FakeClock:
    """Clock that moves forward by a fixed step on every call."""

    def __init__(self, start: datetime = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or utc_now()
        self.step = step

    def __call__(self) -> datetime:
        self.now = self.now + self.step
        return self.now


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    store = Store(backend).initialize()
    set_store(store)
    reset_services()
    yield store
    set_store(None)
    reset_services()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notification_service(store, clock):
    return NotificationService(store, clock=clock)


@pytest.fixture
def alert_service(store, notification_service, clock):
    return AlertService(store, notification_service, clock=clock)


@pytest.fixture
def form_service(store, notification_service, clock):
    return FormService(store, notification_service, clock=clock)


@pytest.fixture
def message_service(store, notification_service, clock):
    return MessageService(store, notification_service, clock=clock)


@pytest.fixture
def client(store):
    with TestClient(app) as c:
        yield c


def alert_payload(**overrides):
    payload = {
        "user_id": "user-1",
        "latitude": 37.78,
        "longitude": -122.41,
        "garbage_type": "hazardous",
        "quantity": "medium",
        "description": "Barrels dumped by the river",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload():
    return alert_payload
