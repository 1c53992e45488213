from __future__ import annotations

from typing import Protocol

from .model import SystemSettings


class SettingsRepository(Protocol):
    def get_settings(self) -> SystemSettings:
        raise NotImplementedError

    def save_settings(self, settings: SystemSettings) -> None:
        raise NotImplementedError
