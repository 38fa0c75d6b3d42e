"""A child process that speaks the Botzone line protocol over its pipes."""

from __future__ import annotations

import os
import subprocess
import threading
import time
from collections.abc import Sequence
from typing import Union

KEEP_RUNNING_SIGNAL = ">>>BOTZONE_REQUEST_KEEP_RUNNING<<<"
NO_MOVE_LINE = "-1 -1 -1 -1 -1 -1"

BotCommand = Union[str, "os.PathLike[str]", Sequence[Union[str, "os.PathLike[str]"]]]


class BotProcessError(RuntimeError):
    """Raised when the bot cannot be written to."""


class BotProcess:
    """Runs a bot executable and exchanges protocol lines with it.

    ``bot_path`` is either the path of an executable or a full command line
    given as a sequence of arguments.
    """

    def __init__(self, bot_path: BotCommand) -> None:
        self._bot_path = bot_path
        self._process: subprocess.Popen[bytes] | None = None
        self._reader: threading.Thread | None = None
        self._buffer = bytearray()
        self._eof = False
        self._cond = threading.Condition()
        self._keep_running = False

    @property
    def bot_path(self) -> BotCommand:
        return self._bot_path

    def __enter__(self) -> BotProcess:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _command(self) -> list[str]:
        if isinstance(self._bot_path, (str, os.PathLike)):
            return [os.fspath(self._bot_path)]
        return [os.fspath(part) for part in self._bot_path]

    def start(self) -> None:
        """Start (or restart) the bot; raise OSError if it cannot be run."""
        self.stop()
        with self._cond:
            self._buffer.clear()
            self._eof = False
        process = subprocess.Popen(
            self._command(),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            bufsize=0,
        )
        self._process = process
        self._reader = threading.Thread(
            target=self._pump, args=(process.stdout,), daemon=True
        )
        self._reader.start()
        self._keep_running = False

    def _pump(self, stream) -> None:
        fd = stream.fileno()
        try:
            while True:
                try:
                    chunk = os.read(fd, 4096)
                except (OSError, ValueError):
                    break
                if not chunk:
                    break
                with self._cond:
                    self._buffer.extend(chunk)
                    self._cond.notify_all()
        finally:
            with self._cond:
                self._eof = True
                self._cond.notify_all()

    def stop(self) -> None:
        """Terminate the bot and release its pipes."""
        process, self._process = self._process, None
        if process is not None:
            if process.stdin is not None:
                try:
                    process.stdin.close()
                except OSError:
                    pass
            if process.poll() is None:
                process.terminate()
            try:
                process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
            if self._reader is not None:
                self._reader.join(timeout=1)
            if process.stdout is not None:
                process.stdout.close()
        self._reader = None
        self._keep_running = False

    def is_running(self) -> bool:
        return self._process is not None and self._process.poll() is None

    def _write(self, text: str) -> None:
        if not self.is_running():
            raise BotProcessError("Bot process is not running")
        assert self._process is not None and self._process.stdin is not None
        data = memoryview(text.encode("utf-8"))
        try:
            while data:
                written = self._process.stdin.write(data)
                data = data[written:]
        except (OSError, ValueError) as exc:
            raise BotProcessError(f"Failed to write to bot: {exc}") from exc

    def send_first_turn(self, move_history: Sequence[str]) -> None:
        """Send the opening request: turn id 1 followed by the history lines.

        An empty history is sent as the single "no move" line.
        """
        lines = ["1", *(move_history or [NO_MOVE_LINE])]
        self._write("".join(f"{line}\n" for line in lines))

    def send_turn(self, opponent_move: str) -> None:
        """Send one move line to a bot that asked to keep running."""
        if not self._keep_running:
            raise BotProcessError("Bot is not in keep-running mode")
        self._write(f"{opponent_move}\n")

    def _read_line(self, timeout: float) -> str:
        if self._process is None:
            return ""
        deadline = time.monotonic() + timeout
        with self._cond:
            while True:
                index = self._buffer.find(b"\n")
                if index >= 0:
                    line = bytes(self._buffer[:index])
                    del self._buffer[: index + 1]
                    return line.decode("utf-8", errors="replace")
                remaining = deadline - time.monotonic()
                if self._eof or remaining <= 0:
                    line = bytes(self._buffer)
                    self._buffer.clear()
                    return line.decode("utf-8", errors="replace")
                self._cond.wait(remaining)

    def read_move(self, timeout: float = 5.0) -> str:
        """Read the bot's move line; a partial or empty line on timeout or EOF."""
        return self._read_line(timeout)

    def read_keep_running(self, timeout: float = 0.5) -> str:
        """Read the line after a move; the keep-running signal enables send_turn."""
        line = self._read_line(timeout)
        if line == KEEP_RUNNING_SIGNAL:
            self._keep_running = True
        return line

    def is_keep_running(self) -> bool:
        return self._keep_running