"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from mdrest.config.defaults import EndpointPaths, get_default_config
from mdrest.config.loader import ConfigLoader
from mdrest.config.validation import ConfigValidator
from mdrest.errors import ConfigError


def write_config(config_dir: Path, text: str) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "mdrest.yaml").write_text(text)


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.base_url == "https://api.polygon.io"
        assert config.paths.list_tickers == "/v3/reference/tickers"
        assert config.paths.get_ticker_details == "/v3/reference/tickers/{ticker}"
        assert config.paths.list_ticker_news == "/v2/reference/news"
        assert config.paths.get_options_contract == "/v3/reference/options/contracts/{options_ticker}"

    def test_default_paths_are_valid(self) -> None:
        """Built-in templates pass validation."""
        config = get_default_config()
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader._dataclass_to_dict(config)) == []


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path / "absent")

        assert loader.load_file_config() == {}
        assert loader.load() == get_default_config()

    def test_merge_config_with_overrides(self, tmp_path: Path) -> None:
        """Test config merging with explicit overrides."""
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"paths": {"list_ticker_news": "/v3/reference/news"}})

        assert config["paths"]["list_ticker_news"] == "/v3/reference/news"
        # Other defaults should remain
        assert config["paths"]["list_tickers"] == "/v3/reference/tickers"
        assert config["base_url"] == "https://api.polygon.io"

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        write_config(tmp_path, "base_url: https://sandbox.example.com\n")

        config = ConfigLoader.create(tmp_path).load()

        assert config.base_url == "https://sandbox.example.com"
        assert config.paths == EndpointPaths()

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        """Explicit overrides take precedence over the YAML file."""
        write_config(tmp_path, (
            "base_url: https://sandbox.example.com\n"
            "paths:\n"
            "  list_tickers: /v4/tickers\n"
        ))

        config = ConfigLoader.create(tmp_path).load({"base_url": "http://localhost:8080"})

        assert config.base_url == "http://localhost:8080"
        assert config.paths.list_tickers == "/v4/tickers"
        assert config.paths.get_ticker_types == "/v3/reference/tickers/types"

    def test_empty_file(self, tmp_path: Path) -> None:
        write_config(tmp_path, "")
        assert ConfigLoader.create(tmp_path).load_file_config() == {}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "base_url: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.create(tmp_path).load_file_config()

        assert exc_info.value.source.endswith("mdrest.yaml")

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        write_config(tmp_path, "- just\n- a list\n")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.create(tmp_path).load_file_config()

    def test_invalid_merged_config(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigError) as exc_info:
            loader.load({"base_url": "ftp://example.com", "paths": {"list_tickers": "tickers"}})

        fields = {issue.field for issue in exc_info.value.context["issues"]}
        assert fields == {"base_url", "paths.list_tickers"}


class TestConfigValidator:
    """Test suite for configuration validation."""

    @pytest.mark.parametrize("url", ["https://api.polygon.io", "http://localhost:8080"])
    def test_valid_base_url(self, url: str) -> None:
        assert ConfigValidator.validate_base_url(url) == []

    @pytest.mark.parametrize("url", [None, 42, "api.polygon.io", "ftp://x.com", "https://api.polygon.io/"])
    def test_invalid_base_url(self, url) -> None:
        errors = ConfigValidator.validate_base_url(url)
        assert len(errors) == 1
        assert errors[0].field == "base_url"
        assert errors[0].value == url

    def test_unknown_endpoint(self) -> None:
        errors = ConfigValidator.validate_paths({"list_trades": "/v3/trades"})
        assert len(errors) == 1
        assert errors[0].field == "paths.list_trades"
        assert errors[0].message == "Unknown endpoint"

    def test_relative_path(self) -> None:
        errors = ConfigValidator.validate_paths({"list_tickers": "v3/reference/tickers"})
        assert errors[0].field == "paths.list_tickers"

    def test_unbalanced_placeholder(self) -> None:
        errors = ConfigValidator.validate_paths({"get_ticker_details": "/v3/reference/tickers/{ticker"})
        assert len(errors) == 1
        assert errors[0].message == "Unbalanced path placeholder"

    def test_paths_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({
            "base_url": "https://api.polygon.io",
            "paths": ["/v3/reference/tickers"],
        })
        assert [e.field for e in errors] == ["paths"]
