"""Configure pytest fixtures and environment for TapPrint contract tests."""

import copy

import pytest
import structlog
from dotenv import load_dotenv

from tapprint_shared.contracts import Layout, PrintSet
from tapprint_shared.core.config import reset_settings

POLICY_VARS = ("TAPPRINT_ENFORCE_CONVENTIONS", "TAPPRINT_REQUIRE_RESPONSE_DATA")


def pytest_sessionstart(session):
    """Load environment variables from a local .env file, if any."""
    load_dotenv()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give every test default validation policy and logging."""
    for var in POLICY_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def user_payload():
    return {
        "id": "usr_1",
        "email": "ada@example.com",
        "name": "Ada",
        "role": "admin",
        "createdAt": "2024-05-01T10:00:00Z",
        "updatedAt": "2024-05-02T10:00:00Z",
    }


@pytest.fixture
def layout_payload():
    return {
        "id": "lay_1",
        "name": "Shipping label",
        "description": "4x6 label",
        "content": {
            "data": {"basePdf": "BLANK_PDF", "schemas": [{"name": {"type": "text"}}]},
            "version": "4.0.0",
        },
        "categoryId": "cat_1",
        "userId": "usr_1",
        "isPublic": False,
        "createdAt": "2024-05-01T10:00:00Z",
        "updatedAt": "2024-05-02T10:00:00Z",
    }


@pytest.fixture
def settings_payload():
    return {
        "copies": 2,
        "printerName": "Zebra-1",
        "paperSize": "A4",
        "orientation": "portrait",
        "quality": "normal",
    }


@pytest.fixture
def print_set_payload(settings_payload):
    return {
        "id": "ps_1",
        "name": "May orders",
        "layoutId": "lay_1",
        "data": [{"name": "Ada"}, {"name": "Grace"}],
        "settings": copy.deepcopy(settings_payload),
        "userId": "usr_1",
        "createdAt": "2024-05-01T10:00:00Z",
        "updatedAt": "2024-05-02T10:00:00Z",
    }


@pytest.fixture
def printer_payload():
    return {
        "name": "Zebra-1",
        "description": "Warehouse label printer",
        "location": "Dock 3",
        "makeModel": "Zebra ZD421",
        "status": "idle",
        "isDefault": True,
        "capabilities": {
            "paperSizes": ["4x6", "A6"],
            "resolutions": ["203dpi", "300dpi"],
            "duplex": False,
            "color": False,
        },
    }


@pytest.fixture
def layout(layout_payload):
    return Layout.model_validate(layout_payload)


@pytest.fixture
def print_set(print_set_payload):
    return PrintSet.model_validate(print_set_payload)
