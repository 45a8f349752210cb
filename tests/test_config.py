"""Unit tests for configuration management module."""

from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from positioning.config import LoggingConfig, OrderingConfig, load_config
from positioning.graph import DepthFirstGraph, KahnGraph


@pytest.fixture
def valid_config_dict() -> dict[str, Any]:
    """Fixture providing valid configuration dictionary."""
    return {
        "graph_strategy": "dfs",
        "logging": {
            "level": "debug",
            "json_logs": False,
        },
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, valid_config_dict: dict[str, Any]) -> Path:
    """Fixture providing temporary YAML config file."""
    config_path = tmp_path / "ordering.yaml"
    with config_path.open("w") as f:
        yaml.safe_dump(valid_config_dict, f)
    return config_path


class TestOrderingConfig:
    """Test OrderingConfig model."""

    def test_defaults(self):
        """Test default configuration."""
        config = OrderingConfig()

        assert config.graph_strategy == "kahn"
        assert config.logging.level == "INFO"
        assert config.logging.json_logs is True
        assert config.graph_factory() is KahnGraph

    def test_strategy_normalized(self):
        """Test strategy names are case-insensitive and stripped."""
        config = OrderingConfig(graph_strategy="  DFS ")

        assert config.graph_strategy == "dfs"
        assert config.graph_factory() is DepthFirstGraph

    def test_unknown_strategy(self):
        """Test unknown strategies are rejected."""
        with pytest.raises(ValidationError, match="graph_strategy must be one of"):
            OrderingConfig(graph_strategy="random")

    def test_invalid_logging_level(self):
        """Test invalid logging levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")


class TestYamlLoading:
    """Test loading configuration from YAML files."""

    def test_from_yaml(self, temp_config_file: Path):
        """Test loading a valid file."""
        config = OrderingConfig.from_yaml(temp_config_file)

        assert config.graph_strategy == "dfs"
        assert config.logging.level == "DEBUG"
        assert config.logging.json_logs is False

    def test_from_yaml_missing_file(self, tmp_path: Path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            OrderingConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_empty_file(self, tmp_path: Path):
        """Test an empty file yields defaults."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        assert OrderingConfig.from_yaml(config_path) == OrderingConfig()

    def test_from_yaml_invalid_yaml(self, tmp_path: Path):
        """Test malformed YAML raises ValueError."""
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("graph_strategy: [kahn\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            OrderingConfig.from_yaml(config_path)

    def test_from_yaml_not_a_mapping(self, tmp_path: Path):
        """Test a top-level list is rejected."""
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- kahn\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            OrderingConfig.from_yaml(config_path)

    def test_load_config_defaults(self):
        """Test load_config without a path returns defaults."""
        assert load_config() == OrderingConfig()

    def test_load_config_from_path(self, temp_config_file: Path):
        """Test load_config with a path reads the file."""
        assert load_config(temp_config_file).graph_strategy == "dfs"

    def test_whitespace_stripped_before_validation(self):
        """Test model-wide whitespace stripping applies to the strategy name."""
        assert OrderingConfig.model_config["str_strip_whitespace"] is True
        assert OrderingConfig(graph_strategy="\tkahn\n").graph_strategy == "kahn"
