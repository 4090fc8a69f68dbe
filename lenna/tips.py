"""Tips of the day: loading and cycling through them with a saved position."""

from __future__ import annotations

from pathlib import Path

from lenna.application import Settings, current
from lenna.translation import locale

NO_TIPS = "<b>No</b> Tips!"
_GROUP = "TipsDialog"
_COUNTER_KEY = f"{_GROUP}/counter"
_STARTUP_KEY = f"{_GROUP}/showonstartup"


def load_tips(app_dir: str | Path | None = None, locale_name: str | None = None) -> list[str]:
    """Tips for ``locale_name``, falling back to English; one tip per line."""
    base = Path(app_dir) if app_dir is not None else current().dir_path
    tips_dir = base / "data" / "tips"
    path = tips_dir / f"tips_{locale_name if locale_name is not None else locale()}.txt"
    if not path.exists():
        path = tips_dir / "tips_en.txt"
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return [NO_TIPS]
    return text.splitlines()


class Tips:
    """A cycling position in a list of tips, remembered across runs."""

    def __init__(self, tips: list[str], settings: Settings | None = None) -> None:
        if not tips:
            raise ValueError("no tips to show")
        self.tips = list(tips)
        self.settings = settings if settings is not None else current().settings()
        self.counter = int(self.settings.value(_COUNTER_KEY, 1))
        self.show_on_startup = bool(self.settings.value(_STARTUP_KEY, True))

    def current(self) -> str:
        """The tip at the current position."""
        return self.tips[self.counter % len(self.tips)]

    def next(self) -> str:
        """Advance to and return the next tip."""
        self.counter += 1
        return self.current()

    def previous(self) -> str:
        """Go back to and return the previous tip."""
        self.counter -= 1
        return self.current()

    def save(self) -> None:
        """Persist the position and the show-on-startup choice."""
        self.settings.set_value(_COUNTER_KEY, self.counter)
        self.settings.set_value(_STARTUP_KEY, self.show_on_startup)

    def __enter__(self) -> Tips:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save()