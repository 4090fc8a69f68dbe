"""An image being processed, with its name, album and EXIF metadata."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
from PIL import ExifTags
from PIL import Image as PILImage
from scipy import ndimage


class Image:
    """Pixel data (a numpy array) plus the name and album it belongs to."""

    def __init__(self, data: Any = None, name: str = "", album: str = "") -> None:
        self.data: np.ndarray | None = None if data is None else np.asarray(data)
        self.name = name
        self.album = album
        self.metadata: dict[Any, Any] = {}

    @classmethod
    def from_file(cls, path: str | Path) -> Image:
        """Load pixels from ``path`` unchanged in depth and channel count."""
        with PILImage.open(path) as pil:
            data = np.array(pil)
        return cls(data)

    def copy(self) -> Image:
        """Deep copy of pixels, name, album and metadata."""
        duplicate = Image(
            None if self.data is None else self.data.copy(), self.name, self.album
        )
        duplicate.metadata = dict(self.metadata)
        return duplicate

    def _require_data(self) -> np.ndarray:
        if self.data is None or self.data.size == 0:
            raise ValueError("image is empty")
        return self.data

    def convolve(self, kernel: Any) -> None:
        """Filter in place with a 2-D kernel (correlation, reflected borders, same depth)."""
        data = self._require_data()
        weights = np.asarray(kernel, dtype=np.float64)
        if weights.ndim != 2 or weights.size == 0:
            raise ValueError("kernel must be a non-empty 2-D array")
        if data.ndim > 2:
            weights = weights.reshape(weights.shape + (1,) * (data.ndim - 2))
        result = ndimage.correlate(data.astype(np.float64), weights, mode="mirror")
        if np.issubdtype(data.dtype, np.integer):
            info = np.iinfo(data.dtype)
            result = np.clip(np.rint(result), info.min, info.max)
        self.data = result.astype(data.dtype)

    def to_pil(self) -> PILImage.Image:
        """The pixels as a Pillow image."""
        return PILImage.fromarray(self._require_data())

    def read_metadata(self, path: str | Path) -> dict[Any, Any]:
        """Read EXIF tags from ``path``, keep them and return a copy."""
        with PILImage.open(path) as pil:
            exif = pil.getexif()
        self.metadata = {ExifTags.TAGS.get(tag, tag): value for tag, value in exif.items()}
        return dict(self.metadata)