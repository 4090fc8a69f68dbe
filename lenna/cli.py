"""The main session: active plugin tabs, start/stop of processing, and the command line."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from lenna.application import configure, current
from lenna.logger import Logger, LoggerHandler, MessageLevel, get_logger
from lenna.pipeline import Process, Worker
from lenna.plugins.base import PluginKind
from lenna.plugins.loader import PluginLoader, get_instance
from lenna.translation import translate

PROJECT_NAME = "lenna"
ORGANIZATION = "lenna-project"
WEB_APP_URL = "https://lenna.app"


def _package_version() -> str:
    try:
        return version(PROJECT_NAME)
    except PackageNotFoundError:
        return ""


class Session:
    """Runs the processing pipeline and manages the active plugins of each stage."""

    def __init__(self, loader: PluginLoader | None = None, logger: Logger | None = None) -> None:
        self.loader = loader if loader is not None else get_instance()
        self.logger = logger if logger is not None else get_logger()
        self.progress = 0
        self.info = ""
        self._is_start = True
        self.button_label = translate("Start")
        self.worker = Worker(
            self.loader, on_progress=self._on_progress, on_finished=self.stop
        )
        self.process = Process(self.worker)
        self.logger.connect(self._on_info, MessageLevel.INFO)

    @property
    def title(self) -> str:
        """Window title: application name and version."""
        app = current()
        return f"{app.name} {app.version}"

    @property
    def running(self) -> bool:
        """Whether processing has been started and not yet stopped."""
        return not self._is_start

    def _on_progress(self, value: int) -> None:
        self.progress = value

    def _on_info(self, msg: str) -> None:
        self.info = msg

    def start(self) -> bool:
        """Start processing in the background; False if it is still running."""
        self.button_label = translate("Stop")
        self._is_start = False
        return self.process.start()

    def stop(self) -> None:
        """Ask processing to stop; the pipeline still finishes its outputs."""
        self.button_label = translate("Start")
        self.worker.stop()
        self._is_start = True

    def toggle(self) -> None:
        """Start when stopped, stop when running."""
        if self._is_start:
            self.start()
        else:
            self.stop()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for background processing; True if it has ended."""
        return self.process.join(timeout)

    def tabs(self, kind: PluginKind) -> list[str]:
        """Titles of the active plugins of ``kind`` in pipeline order."""
        return [plugin.title for plugin in self.loader.active_plugins(PluginKind(kind))]

    def close_tab(self, kind: PluginKind, index: int) -> list[str]:
        """Deactivate the active plugin at ``index`` of ``kind``; returns the remaining tabs."""
        kind = PluginKind(kind)
        plugins = self.loader.active_plugins(kind)
        if 0 <= index < len(plugins):
            self.loader.deactivate_plugin(plugins[index])
        return self.tabs(kind)

    def close(self) -> None:
        """Stop listening to the logger."""
        try:
            self.logger.disconnect(self._on_info, MessageLevel.INFO)
        except ValueError:
            pass

    def __enter__(self) -> Session:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROJECT_NAME,
        description="Batch image processing through input, edit and output plugins.",
        epilog=f"Web application: {WEB_APP_URL}",
    )
    parser.add_argument("--settings", type=Path, help="settings file to use")
    parser.add_argument(
        "--no-discover", action="store_true", help="do not look for installed plugins"
    )
    parser.add_argument(
        "--activate",
        action="append",
        default=[],
        metavar="NAME",
        help="activate a plugin by name (may be repeated; placed first in this order)",
    )
    parser.add_argument(
        "--list", action="store_true", help="list the active plugins of each stage and exit"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {_package_version()}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline with the configured plugins, or list them."""
    args = _build_parser().parse_args(argv)
    app = configure(
        name=PROJECT_NAME, version=_package_version(), organization=ORGANIZATION
    )
    handler = LoggerHandler(get_logger(), sys.stderr)
    log = logging.getLogger(PROJECT_NAME)
    previous_level = log.level
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)
    try:
        log.debug("starting Application")
        loader = PluginLoader(app.settings(args.settings), discover=not args.no_discover)
        try:
            loader.activate_plugins(args.activate)
        except LookupError as exc:
            print(f"{PROJECT_NAME}: {exc}", file=sys.stderr)
            return 2
        with Session(loader) as session:
            if args.list:
                for kind in PluginKind:
                    titles = ", ".join(session.tabs(kind))
                    print(f"{kind.value}:" + (f" {titles}" if titles else ""))
            else:
                session.start()
                session.wait()
                print(f"{session.title}: progress {session.progress}%")
        loader.save_config()
        return 0
    finally:
        log.removeHandler(handler)
        log.setLevel(previous_level)


if __name__ == "__main__":
    sys.exit(main())