"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, url: str) -> None:
        self._log.info("config.loaded", name=name, url=url)

    def config_delay_clamped_warning(
        self, initial_delay_seconds: float, max_delay_seconds: float
    ) -> None:
        self._log.warning(
            "config.delay_clamped_warning",
            initial_delay_seconds=initial_delay_seconds,
            max_delay_seconds=max_delay_seconds,
            message=(
                "initial_delay_seconds exceeds max_delay_seconds;"
                " every delay will be clamped"
            ),
        )
