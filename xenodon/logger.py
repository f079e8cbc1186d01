"""Timestamped logging to a set of sinks."""

from __future__ import annotations

import abc
import os
import time


class Sink(abc.ABC):
    """Destination for finished log lines."""

    @abc.abstractmethod
    def write(self, line):
        """Write one line of output."""


class ConsoleSink(Sink):
    """Sink that prints lines to standard output."""

    def write(self, line):
        print(line)


class FileSink(Sink):
    """Sink that appends lines to a file."""

    def __init__(self, path: str | os.PathLike):
        self._file = open(path, "w", encoding="utf-8")

    def write(self, line):
        self._file.write(f"{line}\n")
        self._file.flush()

    def close(self):
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class Logger:
    """Formats messages with a timestamp and sends them to every sink."""

    def __init__(self):
        self.sinks: list[Sink] = []

    def add_sink(self, sink: Sink):
        self.sinks.append(sink)

    def log(self, fmt, *args):
        stamp = time.strftime("%H:%M:%S", time.localtime())
        message = f"[{stamp}] " + fmt.format(*args)
        for sink in self.sinks:
            sink.write(message)


LOGGER = Logger()