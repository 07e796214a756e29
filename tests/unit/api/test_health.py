"""Tests for the health endpoints and application startup."""

import asyncio

from fastapi.testclient import TestClient

from src.catalog.api.http import app as app_module
from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.features.product import CreateProductCommand
from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from src.catalog.runtime.context import with_context


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "api"}

    def test_ready_when_database_answers(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_not_ready_when_database_fails(self, client: TestClient, monkeypatch):
        database = app_module.app.state.app_dependencies.database_service
        monkeypatch.setattr(database, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


class TestStartup:
    def test_build_dependencies_creates_schema_and_mediator(self):
        with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
            deps = app_module.build_dependencies()
        try:
            assert isinstance(deps, ApplicationDependencies)
            product_id = deps.mediator.send(
                CreateProductCommand(
                    name="Laptop", barcode="1", description="", rate=1
                )
            )
            assert product_id == 1
        finally:
            deps.database_service.dispose()

    def test_startup_and_shutdown(self):
        with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
            asyncio.run(app_module.startup())
        try:
            deps = app_module.app.state.app_dependencies
            assert deps.database_service.health_check()
        finally:
            asyncio.run(app_module.shutdown())
            del app_module.app.state.app_dependencies
