"""Demonstration of ordering plugins contributed by independent modules.

Each contributor only knows about the plugins it cares about; the builder
merges their relative positions into one deterministic load order.
"""

from dataclasses import dataclass
from pathlib import Path

from positioning import CycleDetectedError, OrderingBuilder, load_config
from positioning.log_config import bind_context, clear_context, get_logger


@dataclass(frozen=True)
class Plugin:
    """A plugin identified by name."""

    id: str
    description: str = ""


def contribute_core(builder: OrderingBuilder) -> None:
    builder.element(Plugin("config", "load settings"))
    builder.element(Plugin("database", "open connections")).after("config")


def contribute_web(builder: OrderingBuilder) -> None:
    # "routes" and "auth" are declared by other contributors later on
    builder.element(Plugin("server", "start HTTP server")).after("routes").after("database")
    builder.element(Plugin("routes", "register routes")).after("auth")


def contribute_security(builder: OrderingBuilder) -> None:
    builder.element(Plugin("auth", "install auth middleware")).after("config")
    builder.element(Plugin("audit", "audit log")).before("server")


def main() -> None:
    """Build, validate and sort a plugin load order."""
    config_path = Path(__file__).with_name("ordering.yaml")
    config = load_config(config_path if config_path.exists() else None)
    config.apply_logging()
    logger = get_logger(__name__)

    bind_context(ordering="plugins")

    builder = OrderingBuilder.from_config(config)
    for contribute in (contribute_core, contribute_web, contribute_security):
        contribute(builder)

    report = builder.validate()
    if not report.is_valid:
        print(report.summary())
        return

    for position, plugin in enumerate(builder.sort(), 1):
        print(f"{position}. {plugin.id:<10} {plugin.description}")

    # A contradicting contributor makes the order impossible
    builder.element(Plugin("config")).after("server")
    try:
        builder.sort()
    except CycleDetectedError as e:
        logger.warning("plugin_order_rejected", cycle=e.cycle)

    clear_context()


if __name__ == "__main__":
    main()
