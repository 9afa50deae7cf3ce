"""Reporting file system changes in a directory as they happen."""

from __future__ import annotations

import argparse
import contextlib
import os
import queue
import sys

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

_LABELS = {"created": "Created", "modified": "Modified", "deleted": "Removed", "moved": "Renamed"}


def describe_event(event):
    """Return the lines printed for ``event``: a summary, then what happened."""
    src = os.fsdecode(event.src_path)
    lines = [f"Event: {event.event_type} {src}"]
    if event.event_type in _LABELS:
        lines.append(f"{_LABELS[event.event_type]}: {src}")
    return lines


class _QueueHandler(FileSystemEventHandler):
    def __init__(self, events):
        super().__init__()
        self.events = events

    def on_any_event(self, event):
        self.events.put(event)


@contextlib.contextmanager
def watch(path="."):
    """Watch ``path`` while the block runs; yields a queue of incoming events."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"no such file or directory: {path}")
    events = queue.Queue()
    observer = Observer()
    observer.schedule(_QueueHandler(events), os.fspath(path), recursive=False)
    observer.start()
    try:
        yield events
    finally:
        observer.stop()
        observer.join()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print file system events.")
    parser.add_argument("path", nargs="?", default=".")
    args = parser.parse_args(argv)

    try:
        with watch(args.path) as events:
            while True:
                print(*describe_event(events.get()), sep="\n", flush=True)
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0