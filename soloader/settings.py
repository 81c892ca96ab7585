"""Loader settings stored as ``name value`` lines in a text file."""

from __future__ import annotations

import re
from dataclasses import dataclass

_VALUE = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Settings:
    """Loader settings with their defaults."""

    sample_setting: int = 1
    sample_setting2: bool = True

    def reset(self):
        """Restore every setting to its default."""
        self.sample_setting = 1
        self.sample_setting2 = True

    @classmethod
    def load(cls, path):
        """Read settings from ``path``; a missing file gives the defaults.

        Unknown names and lines without an integer value are ignored.
        """
        settings = cls()
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except FileNotFoundError:
            return settings
        for line in lines:
            name, _, rest = line.strip().partition(" ")
            match = _VALUE.match(rest)
            if not match:
                continue
            value = int(match.group(1))
            if name == "setting_sampleSetting":
                settings.sample_setting = value
            elif name == "setting_sampleSetting2":
                settings.sample_setting2 = bool(value)
        return settings

    def save(self, path):
        """Write the settings to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"setting_sampleSetting {int(self.sample_setting)}\n")
            handle.write(f"setting_sampleSetting2 {int(self.sample_setting2)}\n")