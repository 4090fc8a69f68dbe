"""Language catalogs: discovery, selection and lookup of translated strings."""

from __future__ import annotations

import json
from pathlib import Path

from lenna.application import Settings, current

CATALOG_DIR = "i18n"
CATALOG_SUFFIX = ".json"
DEFAULT_LANGUAGE = "english"
LANGUAGE_KEY = "language"


def _read_catalog(path: str | Path) -> dict[str, str] | None:
    """A catalog mapping source strings to translations, or None if unreadable."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    return {str(key): str(value) for key, value in data.items()}


def _install(catalog: dict[str, str] | None) -> bool:
    """Install a non-empty catalog into the current application."""
    if not catalog:
        return False
    current().translators.append(catalog)
    return True


def translate(text: str) -> str:
    """Translation of ``text`` from the most recently installed catalog that has one."""
    for catalog in reversed(current().translators):
        translated = catalog.get(text)
        if translated:
            return translated
    return text


def locale() -> str:
    """Locale code of the active language; "en" unless a catalog says otherwise."""
    return translate("en")


def install_plugin_translation(plugin_name: str, app_dir: str | Path | None = None) -> bool:
    """Install the catalog for ``plugin_name`` in the current locale, if there is one."""
    base = Path(app_dir) if app_dir is not None else current().dir_path
    path = base / CATALOG_DIR / f"{plugin_name}_{locale()}{CATALOG_SUFFIX}"
    return _install(_read_catalog(path))


class Translation:
    """Languages available in the application's catalog directory."""

    def __init__(
        self,
        app_dir: str | Path | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.app_dir = Path(app_dir) if app_dir is not None else current().dir_path
        self.settings = settings if settings is not None else current().settings()
        self._languages: dict[str, list[Path]] = {}
        for path in self._catalog_files():
            name = self._language_name(path)
            if name:
                self._languages.setdefault(name, []).append(path)
        self.language: str = str(self.settings.value(LANGUAGE_KEY, DEFAULT_LANGUAGE))
        self.load_language_file()

    def _catalog_files(self) -> list[Path]:
        directory = self.app_dir / CATALOG_DIR
        if not directory.is_dir():
            return []
        return sorted(
            (p for p in directory.glob(f"*{CATALOG_SUFFIX}") if p.is_file()),
            key=lambda p: p.name,
        )

    @staticmethod
    def _language_name(path: Path) -> str:
        catalog = _read_catalog(path) or {}
        return catalog.get(DEFAULT_LANGUAGE, "")

    def languages(self) -> list[str]:
        """Sorted language names, one entry per catalog providing it."""
        return [name for name in sorted(self._languages) for _ in self._languages[name]]

    def set_language(self, language: str) -> None:
        """Store ``language`` as the language to use from the next start on."""
        self.settings.set_value(LANGUAGE_KEY, language)

    def load_language_file(self) -> bool:
        """Install the catalog of the current language; True if one was installed."""
        files = self._languages.get(self.language)
        if not files:
            return False
        return _install(_read_catalog(files[-1]))