"""
Test CORS configuration for the toolset API

These tests verify:
1. Allowed origins and origin suffixes are read from the environment
2. CORS headers are only echoed back for allowed origins
3. Logging configuration is validated
"""

import logging
import os

import pytest
from fastapi.testclient import TestClient

from netkit.config import (
    DEFAULT_ALLOWED_ORIGINS,
    get_cors_origin_regex,
    get_cors_origin_suffixes,
    get_cors_origins,
    get_log_level,
)
from netkit.main import create_app


class TestCORSConfiguration:
    """Test CORS configuration functions"""

    def test_cors_origins_default_to_public_sites(self):
        """CORS should fall back to the public toolset sites"""
        os.environ.pop("ALLOWED_ORIGINS", None)
        origins = get_cors_origins()
        assert origins == DEFAULT_ALLOWED_ORIGINS
        assert "*" not in origins

    def test_cors_origins_from_environment(self):
        """CORS should parse comma-separated origins from environment"""
        os.environ["ALLOWED_ORIGINS"] = "https://app.example.com,https://custom.domain.com"
        origins = get_cors_origins()
        assert origins == ["https://app.example.com", "https://custom.domain.com"]

    def test_cors_origins_accept_whitespace_separators(self):
        """CORS parser should accept commas, spaces or both"""
        os.environ["ALLOWED_ORIGINS"] = "  https://a.example.com  ,  https://b.example.com https://c.example.com "
        origins = get_cors_origins()
        assert origins == ["https://a.example.com", "https://b.example.com", "https://c.example.com"]

    def test_blank_origins_use_defaults(self):
        os.environ["ALLOWED_ORIGINS"] = "   "
        assert get_cors_origins() == DEFAULT_ALLOWED_ORIGINS

    def test_suffixes_empty_when_not_set(self):
        os.environ.pop("ALLOWED_ORIGIN_SUFFIXES", None)
        assert get_cors_origin_suffixes() == []
        assert get_cors_origin_regex() is None

    def test_suffixes_are_normalised(self):
        os.environ["ALLOWED_ORIGIN_SUFFIXES"] = "lovable.dev, ..Preview.Example.com"
        assert get_cors_origin_suffixes() == [".lovable.dev", ".preview.example.com"]


class TestCORSHeaders:
    """Test CORS headers on real requests"""

    def test_allowed_origin_is_echoed(self):
        os.environ.pop("ALLOWED_ORIGINS", None)
        client = TestClient(create_app())
        response = client.get("/api/hello", headers={"Origin": "https://jlt-3-tools.vercel.app"})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://jlt-3-tools.vercel.app"

    def test_unknown_origin_gets_no_cors_header(self):
        os.environ.pop("ALLOWED_ORIGINS", None)
        client = TestClient(create_app())
        response = client.get("/api/hello", headers={"Origin": "https://evil.example.com"})
        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers

    def test_preflight_for_allowed_origin(self):
        os.environ["ALLOWED_ORIGINS"] = "http://localhost:5173"
        client = TestClient(create_app())
        response = client.options(
            "/api/subnet-calc",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_suffix_matches_subdomains(self):
        os.environ["ALLOWED_ORIGIN_SUFFIXES"] = ".lovable.dev"
        client = TestClient(create_app())
        for origin in ("https://preview-123.lovable.dev", "https://lovable.dev"):
            response = client.get("/api/hello", headers={"Origin": origin})
            assert response.headers["access-control-allow-origin"] == origin

    def test_suffix_does_not_match_lookalikes(self):
        os.environ["ALLOWED_ORIGIN_SUFFIXES"] = ".lovable.dev"
        client = TestClient(create_app())
        for origin in ("https://evil-lovable.dev", "https://lovable.dev.evil.com"):
            response = client.get("/api/hello", headers={"Origin": origin})
            assert "access-control-allow-origin" not in response.headers


class TestLogLevel:
    def test_default_is_info(self):
        os.environ.pop("LOG_LEVEL", None)
        assert get_log_level() == logging.INFO

    def test_case_insensitive(self):
        os.environ["LOG_LEVEL"] = "debug"
        assert get_log_level() == logging.DEBUG

    def test_invalid_level(self):
        os.environ["LOG_LEVEL"] = "chatty"
        with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
            get_log_level()
