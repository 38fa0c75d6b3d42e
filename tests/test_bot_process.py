import sys
import textwrap

import pytest

from amazons.bot_process import (
    KEEP_RUNNING_SIGNAL,
    NO_MOVE_LINE,
    BotProcess,
    BotProcessError,
)


def _command(tmp_path, body):
    script = tmp_path / "bot.py"
    script.write_text(textwrap.dedent(body))
    return [sys.executable, "-u", str(script)]


ECHO_BOT = """
import sys
for line in sys.stdin:
    print(line.rstrip("\\n"), flush=True)
"""

SIGNAL_BOT = f"""
import sys
for line in sys.stdin:
    print(line.rstrip("\\n"), flush=True)
    print("{KEEP_RUNNING_SIGNAL}", flush=True)
"""

SILENT_BOT = """
import sys
sys.stdin.read()
"""

PARTIAL_BOT = """
import sys
sys.stdout.write("abc")
sys.stdout.flush()
"""


def test_not_running_before_start(tmp_path):
    bot = BotProcess(_command(tmp_path, ECHO_BOT))
    assert bot.is_running() is False
    assert bot.read_move(0.1) == ""


def test_start_and_stop(tmp_path):
    bot = BotProcess(_command(tmp_path, ECHO_BOT))
    bot.start()
    try:
        assert bot.is_running() is True
    finally:
        bot.stop()
    assert bot.is_running() is False


def test_context_manager_stops(tmp_path):
    with BotProcess(_command(tmp_path, ECHO_BOT)) as bot:
        bot.start()
        assert bot.is_running() is True
    assert bot.is_running() is False


def test_first_turn_without_history(tmp_path):
    with BotProcess(_command(tmp_path, ECHO_BOT)) as bot:
        bot.start()
        bot.send_first_turn([])
        assert bot.read_move(5.0) == "1"
        assert bot.read_move(5.0) == NO_MOVE_LINE
        assert NO_MOVE_LINE == "-1 -1 -1 -1 -1 -1"


def test_first_turn_with_history(tmp_path):
    history = ["0 2 3 2 3 3", "5 7 5 4 6 4"]
    with BotProcess(_command(tmp_path, ECHO_BOT)) as bot:
        bot.start()
        bot.send_first_turn(history)
        lines = [bot.read_move(5.0) for _ in range(3)]
        assert lines == ["1", *history]


def test_send_first_turn_when_not_running(tmp_path):
    bot = BotProcess(_command(tmp_path, ECHO_BOT))
    with pytest.raises(BotProcessError):
        bot.send_first_turn([])


def test_send_turn_requires_keep_running(tmp_path):
    with BotProcess(_command(tmp_path, ECHO_BOT)) as bot:
        bot.start()
        assert bot.is_keep_running() is False
        with pytest.raises(BotProcessError):
            bot.send_turn("1 2 3 4 5 6")


def test_keep_running_signal_enables_send_turn(tmp_path):
    with BotProcess(_command(tmp_path, SIGNAL_BOT)) as bot:
        bot.start()
        bot.send_first_turn(["7 7 7 7 7 7"])
        assert bot.read_move(5.0) == "1"
        assert bot.read_keep_running(5.0) == KEEP_RUNNING_SIGNAL
        assert bot.is_keep_running() is True
        bot.send_turn("1 2 3 4 5 6")
        # Remaining output of the first turn, then the echoed turn.
        assert bot.read_move(5.0) == "7 7 7 7 7 7"
        assert bot.read_keep_running(5.0) == KEEP_RUNNING_SIGNAL
        assert bot.read_move(5.0) == "1 2 3 4 5 6"


def test_other_line_does_not_enable_keep_running(tmp_path):
    with BotProcess(_command(tmp_path, ECHO_BOT)) as bot:
        bot.start()
        bot.send_first_turn([])
        assert bot.read_keep_running(5.0) == "1"
        assert bot.is_keep_running() is False


def test_read_times_out_with_empty_line(tmp_path):
    with BotProcess(_command(tmp_path, SILENT_BOT)) as bot:
        bot.start()
        assert bot.read_move(0.2) == ""
        assert bot.is_running() is True


def test_partial_line_returned_at_eof(tmp_path):
    with BotProcess(_command(tmp_path, PARTIAL_BOT)) as bot:
        bot.start()
        assert bot.read_move(5.0) == "abc"


def test_restart_resets_keep_running(tmp_path):
    with BotProcess(_command(tmp_path, SIGNAL_BOT)) as bot:
        bot.start()
        bot.send_first_turn([])
        bot.read_move(5.0)
        assert bot.read_keep_running(5.0) == KEEP_RUNNING_SIGNAL
        bot.start()
        assert bot.is_keep_running() is False
        assert bot.is_running() is True


def test_start_missing_executable(tmp_path):
    bot = BotProcess(str(tmp_path / "no-such-bot"))
    with pytest.raises(OSError):
        bot.start()
    assert bot.is_running() is False


def test_bot_path_kept(tmp_path):
    command = _command(tmp_path, ECHO_BOT)
    assert BotProcess(command).bot_path == command