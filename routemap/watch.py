"""Watching a route file and rebuilding on changes."""

import logging
import os.path
from pathlib import Path
from typing import Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from routemap.build import Builder
from routemap.errors import RouteMapError
from routemap.loader import GraphLoader


class Watcher:

    """Watch a route file for changes and rebuild using a given builder."""

    def __init__(
        self,
        source: Path,
        loader: GraphLoader,
        builder: Builder,
        output: Optional[Path] = None,
    ):
        self.source = source
        self.handler = Handler(source, loader, builder, output)
        self.observer = Observer()

    def run(self):
        # Watch the parent directory since editors often replace the file.
        directory = os.path.dirname(os.path.abspath(self.source))
        self.observer.schedule(self.handler, directory, recursive=False)
        logging.info("running initial build")
        self.handler.build()
        logging.info("watching %s", self.source)
        self.observer.start()
        try:
            self.observer.join()
        except KeyboardInterrupt:
            logging.info("quitting")
        finally:
            self.observer.stop()
            self.observer.join()


class Handler(FileSystemEventHandler):

    """Handler for file system events on the route file."""

    def __init__(
        self,
        source: Path,
        loader: GraphLoader,
        builder: Builder,
        output: Optional[Path],
    ):
        super().__init__()
        self.source = source
        self.target = os.path.abspath(source)
        self.loader = loader
        self.builder = builder
        self.output = output

    def matches(self, event: FileSystemEvent) -> bool:
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and os.path.abspath(p) == self.target for p in paths)

    def on_any_event(self, event: FileSystemEvent):
        if event.is_directory or not self.matches(event):
            return
        if event.event_type not in ("modified", "created", "moved"):
            return
        logging.info("%s %s: build", event.src_path, event.event_type)
        self.build()

    def build(self) -> bool:
        """Load the route file and build it. Returns False on errors."""
        try:
            route_map = self.loader.load_file(self.source)
        except RouteMapError as ex:
            logging.error("%s", ex)
            return False
        try:
            self.builder.build(route_map, self.output)
        except OSError as ex:
            logging.error("cannot write %s: %s", self.output, ex.strerror or ex)
            return False
        return True
