"""Unit tests for the uvicorn entry point module"""

import api
from config import ApplicationConfig


class TestEntryPoint:

    def test_module_exposes_billing_app(self):
        assert api.app.title == "Estimate Billing Service"
        assert "entry point" in api.__doc__

    def test_routes_mounted_under_api_prefix(self):
        paths = {route.path for route in api.app.routes}

        assert "/health" in paths
        assert f"{ApplicationConfig.API_PREFIX}/bills" in paths
        assert f"{ApplicationConfig.API_PREFIX}/drafts" in paths
        assert f"{ApplicationConfig.API_PREFIX}/catalog" in paths
