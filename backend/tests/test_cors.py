"""
Tarot Reader Backend — CORS Policy Tests
========================================

What:  Tests for build_cors_policy() and the CORS middleware wiring.

What we test:
    ✅ Development mode allows exactly the local dev servers
    ✅ Production mode honours ALLOWED_ORIGINS
    ✅ Production mode without ALLOWED_ORIGINS falls back to all origins
    ✅ Methods, headers and credentials are fixed in every mode
    ✅ Preflight requests through the running app
"""

import pytest
from httpx import AsyncClient, ASGITransport

from app.config import Settings
from app.cors import ALLOWED_METHODS, DEV_ORIGINS, build_cors_policy
from app.main import create_app


def make_settings(**overrides) -> Settings:
    values = {"environment": "development", "allowed_origins": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestBuildCorsPolicy:
    """Tests for origin resolution per run mode."""

    def test_development_uses_local_origins(self):
        policy = build_cors_policy(make_settings())

        assert policy.allow_origins == DEV_ORIGINS
        assert "http://localhost:3000" in policy.allow_origins
        assert "http://127.0.0.1:5173" in policy.allow_origins
        assert not policy.allows_all_origins

    def test_development_ignores_allowed_origins(self):
        policy = build_cors_policy(make_settings(allowed_origins="https://example.com"))
        assert policy.allow_origins == DEV_ORIGINS

    def test_production_reads_allowed_origins(self):
        policy = build_cors_policy(make_settings(
            environment="production",
            allowed_origins="https://tarot.example.com, https://www.tarot.example.com",
        ))

        assert policy.allow_origins == [
            "https://tarot.example.com",
            "https://www.tarot.example.com",
        ]

    def test_production_unset_origins_allows_all(self, caplog):
        policy = build_cors_policy(make_settings(environment="production", allowed_origins=None))

        assert policy.allow_origins == ["*"]
        assert policy.allows_all_origins
        assert "any origin" in caplog.text

    @pytest.mark.parametrize("configured", ["", "  ,  "])
    def test_production_blank_origins_allows_none(self, configured, caplog):
        """A set-but-blank ALLOWED_ORIGINS must not open the policy."""
        policy = build_cors_policy(make_settings(environment="production", allowed_origins=configured))

        assert policy.allow_origins == []
        assert not policy.allows_all_origins
        assert "lists no origins" in caplog.text

    def test_fixed_methods_headers_and_credentials(self):
        for settings in (make_settings(), make_settings(environment="production")):
            policy = build_cors_policy(settings)
            assert policy.allow_methods == ALLOWED_METHODS
            assert policy.allow_headers == ["*"]
            assert policy.allow_credentials is True


class TestCorsMiddleware:
    """Preflight and simple requests through the assembled app."""

    @staticmethod
    async def _options(app, origin: str):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            return await client.options(
                "/api/readings",
                headers={
                    "Origin": origin,
                    "Access-Control-Request-Method": "POST",
                    "Access-Control-Request-Headers": "content-type",
                },
            )

    @pytest.mark.asyncio
    async def test_preflight_allowed_dev_origin(self):
        response = await self._options(create_app(make_settings()), "http://localhost:5173")

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "POST" in response.headers["access-control-allow-methods"]
        assert response.headers["x-api-version"] == "1.0.0"

    @pytest.mark.asyncio
    async def test_preflight_rejects_unknown_origin_in_development(self):
        response = await self._options(create_app(make_settings()), "https://evil.example.com")

        assert response.status_code == 400
        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_preflight_open_policy_in_production(self):
        app = create_app(make_settings(environment="production"))
        response = await self._options(app, "https://anywhere.example.com")

        assert response.status_code == 200
        # With credentials enabled the origin is echoed rather than "*"
        assert response.headers["access-control-allow-origin"] == "https://anywhere.example.com"

    @pytest.mark.asyncio
    async def test_preflight_rejected_when_production_origins_blank(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("ALLOWED_ORIGINS", "")
        app = create_app(Settings(_env_file=None))
        response = await self._options(app, "https://anywhere.example.com")

        assert response.status_code == 400
        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_simple_request_gets_cors_headers(self, test_client):
        response = await test_client.get(
            "/api/readings", headers={"Origin": "http://127.0.0.1:3000"}
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://127.0.0.1:3000"
