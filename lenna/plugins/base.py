"""Base classes for input, edit and output plugins."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum
from typing import Any

from lenna.image import Image

NULL_UID = "{00000000-0000-0000-0000-000000000000}"


class PluginKind(Enum):
    """Stage of the pipeline a plugin takes part in."""

    INPUT = "input"
    EDIT = "edit"
    OUTPUT = "output"


def _normalise_uid(uid: Any) -> str:
    if uid is None:
        return NULL_UID
    try:
        return "{" + str(uuid.UUID(str(uid).strip().strip("{}"))) + "}"
    except ValueError:
        return NULL_UID


class Plugin(ABC):
    """A plugin with descriptive attributes and an instance identifier."""

    name: str = "unknown"
    title: str = ""
    version: str = ""
    author: str = ""
    description: str = ""
    icon: Any = None

    def __init__(self, uid: str | None = None) -> None:
        self.uid = uid

    @property
    def uid(self) -> str:
        """Identifier in braced UUID form; invalid values become the null UID."""
        return self._uid

    @uid.setter
    def uid(self, value: str | None) -> None:
        self._uid = _normalise_uid(value)

    def create_instance(self, uid: str) -> Plugin:
        """A new plugin of the same class carrying ``uid``."""
        instance = type(self)()
        instance.uid = uid
        return instance

    def kinds(self) -> frozenset[PluginKind]:
        """The pipeline stages this plugin implements."""
        return frozenset(kind for kind, cls in _KIND_CLASSES.items() if isinstance(self, cls))


class InputPlugin(Plugin):
    """Produces images one at a time."""

    @abstractmethod
    def init(self) -> None:
        """Prepare to produce images."""

    @abstractmethod
    def has_next(self) -> bool:
        """Whether another image is available."""

    @abstractmethod
    def next(self) -> Image:
        """The next image."""

    @abstractmethod
    def progress(self) -> int:
        """Progress through the input, 0 to 100."""

    def __iter__(self) -> Iterator[Image]:
        while self.has_next():
            yield self.next()


class EditPlugin(Plugin):
    """Changes an image in place."""

    @abstractmethod
    def edit(self, image: Image) -> None:
        """Edit ``image``."""


class OutputPlugin(Plugin):
    """Consumes finished images."""

    @abstractmethod
    def out(self, image: Image) -> None:
        """Write or collect ``image``."""

    @abstractmethod
    def finish(self) -> None:
        """Called once after all images were passed to out()."""


_KIND_CLASSES: dict[PluginKind, type[Plugin]] = {
    PluginKind.INPUT: InputPlugin,
    PluginKind.EDIT: EditPlugin,
    PluginKind.OUTPUT: OutputPlugin,
}