"""Configuration Management with Pydantic.

This module implements the configuration models for the ordering builder,
parsed and validated from YAML files. The only behavioral option is the
graph strategy; the rest configures logging.
"""

from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field, field_validator

from positioning.graph import GRAPH_STRATEGIES, get_graph_factory
from positioning.graph.base import GraphFactory
from positioning.log_config import configure_logging

logger = structlog.get_logger(__name__)


class LoggingConfig(BaseModel):
    """Logging configuration settings.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render events as JSON instead of console output
    """

    level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=True,
        description="Render logs as JSON",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class OrderingConfig(BaseModel):
    """Ordering builder configuration.

    Attributes:
        graph_strategy: Name of the graph used to sort ('kahn' or 'dfs')
        logging: Logging configuration
    """

    graph_strategy: str = Field(
        default="kahn",
        description="Topological sort strategy",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"str_strip_whitespace": True}

    @field_validator("graph_strategy")
    @classmethod
    def validate_graph_strategy(cls, v: str) -> str:
        """Validate that the strategy is one of the bundled graphs.

        Raises:
            ValueError: If the strategy is unknown
        """
        normalized = v.lower().strip()
        if normalized not in GRAPH_STRATEGIES:
            msg = f"graph_strategy must be one of: {', '.join(sorted(GRAPH_STRATEGIES))}"
            raise ValueError(msg)
        return normalized

    @classmethod
    def from_yaml(cls, path: str | Path) -> "OrderingConfig":
        """Load configuration from a YAML file.

        An empty file yields the defaults.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated OrderingConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If the YAML is malformed or the values are invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config = cls(**config_data)

        logger.info(
            "configuration_loaded",
            graph_strategy=config.graph_strategy,
            logging_level=config.logging.level,
        )

        return config

    def graph_factory(self) -> GraphFactory:
        """Return the factory for the configured graph strategy."""
        return get_graph_factory(self.graph_strategy)

    def apply_logging(self) -> None:
        """Configure structlog from the logging section."""
        configure_logging(level=self.logging.level, json_logs=self.logging.json_logs)


def load_config(config_path: str | Path | None = None) -> OrderingConfig:
    """Load configuration from file, or return defaults when no path is given.

    Args:
        config_path: Path to a YAML configuration file

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If config file is invalid
    """
    if config_path is None:
        return OrderingConfig()

    return OrderingConfig.from_yaml(config_path)


__all__ = [
    "LoggingConfig",
    "OrderingConfig",
    "load_config",
]
