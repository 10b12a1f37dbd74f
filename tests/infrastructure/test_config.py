"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from storefront.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.address_url == "https://viacep.com.br"
        assert settings.address_timeout == 5.0
        assert settings.admin_token is None
        assert settings.log_level == "INFO"
        assert settings.data_dir.name == "data"

    def test_overrides(self, tmp_path):
        settings = Settings.from_env(
            {
                "STOREFRONT_DATA_DIR": str(tmp_path),
                "STOREFRONT_ADDRESS_URL": "http://localhost:8080/",
                "STOREFRONT_ADDRESS_TIMEOUT": "2.5",
                "STOREFRONT_ADMIN_TOKEN": "s3cret",
                "STOREFRONT_LOG_LEVEL": "debug",
            }
        )
        assert settings.data_dir == Path(tmp_path)
        assert settings.address_url == "http://localhost:8080"
        assert settings.address_timeout == 2.5
        assert settings.admin_token == "s3cret"
        assert settings.log_level == "DEBUG"

    def test_empty_admin_token_means_none(self):
        assert Settings.from_env({"STOREFRONT_ADMIN_TOKEN": ""}).admin_token is None

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_bad_timeout(self, value):
        with pytest.raises(ValueError):
            Settings.from_env({"STOREFRONT_ADDRESS_TIMEOUT": value})
