from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from talenthub.api import create_app
from talenthub.container import AppContainer, create_container


@pytest.fixture
def container() -> AppContainer:
    return create_container(settings={"strengths": {"delay_seconds": 0}})


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
