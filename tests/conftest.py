from typing import Optional

import pytest
from fastapi.testclient import TestClient

from apps.generate import GenerateController
from apps.generate.main import create_app
from apps.generate.registry import ServiceRegistry
from lib.config.generate_loader import GenerateConfig
from lib.contracts.msg_service import MsgService

from tests.fakes import EchoService


@pytest.fixture
def make_client():
    def _make(*services: MsgService, versions=None, config: Optional[GenerateConfig] = None) -> TestClient:
        ctl = GenerateController(
            registry=ServiceRegistry(services or (EchoService(),)),
            versions=versions,
            config=config or GenerateConfig(),
        )
        return TestClient(create_app(ctl))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
