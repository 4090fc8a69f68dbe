"""Application identity and persistent per-application settings."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from platformdirs import user_config_path


class Settings:
    """Key/value settings stored as JSON; keys use '/' to form groups."""

    def __init__(
        self,
        organization: str = "",
        application: str = "",
        path: str | Path | None = None,
    ) -> None:
        self.organization = organization
        self.application = application
        if path is None:
            path = (
                user_config_path(application or "lenna", organization or None, roaming=True)
                / "settings.json"
            )
        self.path = Path(path)
        self._values: dict[str, Any] = {}
        if self.path.exists():
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(loaded, dict):
                raise ValueError(f"settings file {self.path} does not hold a mapping")
            self._values = loaded

    def value(self, key: str, default: Any = None) -> Any:
        """Stored value for ``key``, or ``default`` when absent."""
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` and persist."""
        self._values[key] = value
        self.save()

    def remove(self, key: str) -> None:
        """Remove ``key`` and every key in the group of that name; '' clears all."""
        if key:
            prefix = f"{key}/"
            self._values = {
                k: v for k, v in self._values.items() if k != key and not k.startswith(prefix)
            }
        else:
            self._values = {}
        self.save()

    def child_keys(self, group: str | None = None) -> list[str]:
        """Sorted keys directly inside ``group`` (top level if None)."""
        prefix = f"{group.strip('/')}/" if group else ""
        return sorted(
            {
                k[len(prefix):]
                for k in self._values
                if k.startswith(prefix) and "/" not in k[len(prefix):]
            }
        )

    def save(self) -> None:
        """Write all settings to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8"
        )


def _default_dir() -> Path:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


@dataclass
class Application:
    """Name, version, organization and install directory of the running program."""

    name: str = "lenna"
    version: str = ""
    organization: str = "lenna-project"
    dir_path: Path = field(default_factory=_default_dir)
    translators: list = field(default_factory=list)

    def settings(self, path: str | Path | None = None) -> Settings:
        """Settings for this organization and application."""
        return Settings(self.organization, self.name, path)


_CURRENT = Application()


def configure(
    name: str | None = None,
    version: str | None = None,
    organization: str | None = None,
    dir_path: str | Path | None = None,
) -> Application:
    """Update the given fields of the current application and return it."""
    if name is not None:
        _CURRENT.name = name
    if version is not None:
        _CURRENT.version = version
    if organization is not None:
        _CURRENT.organization = organization
    if dir_path is not None:
        _CURRENT.dir_path = Path(dir_path)
    return _CURRENT


def current() -> Application:
    """The application description shared by the whole program."""
    return _CURRENT