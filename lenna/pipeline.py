"""Running images from the active input plugins through edit and output plugins."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from lenna.image import Image
from lenna.logger import get_logger
from lenna.plugins.base import PluginKind
from lenna.plugins.loader import PluginLoader, get_instance

ProgressCallback = Callable[[int], None]
FinishedCallback = Callable[[], None]


class ImageProcessor:
    """Passes one image through every active edit plugin, then every output plugin."""

    def __init__(self, image: Image, loader: PluginLoader | None = None) -> None:
        self.image = image
        self.loader = loader

    def run(self) -> None:
        loader = self.loader if self.loader is not None else get_instance()
        for plugin in loader.active_plugins(PluginKind.EDIT):
            plugin.edit(self.image)
        for plugin in loader.active_plugins(PluginKind.OUTPUT):
            plugin.out(self.image)


class Worker:
    """Reads all images from the active input plugins and processes them in a thread pool."""

    def __init__(
        self,
        loader: PluginLoader | None = None,
        on_progress: ProgressCallback | None = None,
        on_finished: FinishedCallback | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.loader = loader
        self.on_progress = on_progress
        self.on_finished = on_finished
        self.max_workers = max_workers if max_workers is not None else (os.cpu_count() or 1)
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._stopped = threading.Event()
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        """Whether the worker is not running or has been asked to stop."""
        return self._stopped.is_set()

    def _emit_progress(self, value: int) -> None:
        if self.on_progress is not None:
            self.on_progress(value)

    def process(self) -> None:
        """Process every image of every active input plugin, then finish the outputs."""
        loader = self.loader if self.loader is not None else get_instance()
        self._stopped.clear()
        self._emit_progress(0)
        for input_plugin in loader.active_plugins(PluginKind.INPUT):
            input_plugin.init()
            get_logger().info(f"{input_plugin.title} initialized")

            futures: list[Future[None]] = []
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                while input_plugin.has_next():
                    image = input_plugin.next()
                    futures.append(pool.submit(ImageProcessor(image, loader).run))
                    self._emit_progress(input_plugin.progress())
                    if self.stopped:
                        self._emit_progress(100)
                        break
            for future in futures:
                future.result()
            if self.stopped:
                break
        self._finish(loader)
        if self.on_finished is not None:
            self.on_finished()

    def stop(self) -> None:
        """Ask a running process() to stop after the current image."""
        self._stopped.set()

    def _finish(self, loader: PluginLoader) -> None:
        self._emit_progress(100)
        for output_plugin in loader.active_plugins(PluginKind.OUTPUT):
            output_plugin.finish()


class Process:
    """Runs a worker on a background thread; can be started again once it has ended."""

    def __init__(self, worker: Worker) -> None:
        self.worker = worker
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    def run(self) -> None:
        """Run the worker on the calling thread."""
        self.worker.process()

    def start(self) -> bool:
        """Start the worker in the background; False if it is already running."""
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return False
            self._thread = threading.Thread(target=self.run, name="lenna-process", daemon=True)
            self._thread.start()
            return True

    def is_running(self) -> bool:
        """Whether the background thread is still working."""
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the background thread; True if it has ended."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return not self.is_running()