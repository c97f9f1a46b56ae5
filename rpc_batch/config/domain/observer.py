"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, url: str) -> None: ...

    def config_delay_clamped_warning(
        self, initial_delay_seconds: float, max_delay_seconds: float
    ) -> None: ...
