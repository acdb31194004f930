"""
Tests for the command line entry point and settings.
"""

import logging
import random

import pytest

import termsnake.main as main_module
from termsnake.config import Settings, load_settings
from termsnake.domain import RIGHT
from termsnake.game import GameResult
from termsnake.terminal import KeyEvent


class TestPlay:
    """Tests for play(): one session on a terminal plus the end messages."""

    def test_quit_prints_end_text(self, make_terminal, capsys):
        """Quitting prints only the end text and restores the terminal."""
        terminal = make_terminal(events=[KeyEvent(RIGHT), KeyEvent("q")])
        result = main_module.play(terminal, rng=random.Random(0))

        assert result.reason == "quit"
        out = capsys.readouterr().out
        assert "The program ended." in out
        assert "Game Over" not in out
        assert terminal.raw is False
        assert terminal.cursor_visible is True

    def test_game_over_prints_message(self, make_terminal, capsys):
        """The game-over message comes before the end text."""
        # 1x1 board: the snake meets itself on its first move
        terminal = make_terminal(width=1, height=1, events=[KeyEvent(RIGHT)])
        result = main_module.play(terminal)

        assert result.reason == "self_collision"
        out = capsys.readouterr().out
        assert out.index("Game Over! You hit yourself.") < out.index("The program ended.")
        assert terminal.raw is False

    def test_unexpected_error_restores_terminal(self, make_terminal, caplog):
        """Terminal errors are logged, propagate, and still restore the terminal."""
        terminal = make_terminal()

        def broken_poll(timeout_ms):
            raise OSError("terminal went away")

        terminal.poll_event = broken_poll
        with caplog.at_level(logging.ERROR, logger="termsnake.main"):
            with pytest.raises(OSError):
                main_module.play(terminal)
        assert terminal.raw is False
        assert terminal.cursor_visible is True
        assert "Game aborted" in caplog.text


class TestMain:
    """Tests for the main() entry point."""

    def test_exit_code_zero_on_game_over(self, monkeypatch):
        """Game over is a normal exit."""
        monkeypatch.setattr(main_module, "configure_logging", lambda settings: None)
        monkeypatch.setattr(
            main_module, "play",
            lambda rng=None: GameResult(reason="self_collision", message="Game Over! You hit yourself."),
        )
        assert main_module.main([]) == 0

    def test_seed_builds_rng(self, monkeypatch):
        """TERMSNAKE_SEED gives play() a seeded Random."""
        seen = {}
        monkeypatch.setenv("TERMSNAKE_SEED", "7")
        monkeypatch.setattr(main_module, "configure_logging", lambda settings: None)
        monkeypatch.setattr(main_module, "play", lambda rng=None: seen.setdefault("rng", rng))
        main_module.main([])
        assert isinstance(seen["rng"], random.Random)
        assert seen["rng"].random() == random.Random(7).random()

    def test_keyboard_interrupt_is_graceful(self, monkeypatch, capsys):
        """A stray KeyboardInterrupt still ends with exit code 0."""
        def interrupted(rng=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(main_module, "configure_logging", lambda settings: None)
        monkeypatch.setattr(main_module, "play", interrupted)
        assert main_module.main([]) == 0
        assert "The program ended." in capsys.readouterr().out

    def test_rejects_arguments(self):
        """The command takes no options."""
        with pytest.raises(SystemExit):
            main_module.main(["--width", "10"])


class TestSettings:
    """Tests for load_settings() and configure_logging()."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("TERMSNAKE_LOG_LEVEL", "TERMSNAKE_LOG_FILE", "TERMSNAKE_SEED"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        """With nothing set, log at INFO to nowhere and use no seed."""
        assert load_settings() == Settings(log_level="INFO", log_file=None, seed=None)

    def test_values_from_environment(self, monkeypatch):
        """Values are read, unquoted and normalised."""
        monkeypatch.setenv("TERMSNAKE_LOG_LEVEL", "debug")
        monkeypatch.setenv("TERMSNAKE_LOG_FILE", '"/tmp/snake.log"')
        monkeypatch.setenv("TERMSNAKE_SEED", " 42 ")
        assert load_settings() == Settings(log_level="DEBUG", log_file="/tmp/snake.log", seed=42)

    def test_blank_values_are_unset(self, monkeypatch):
        """Whitespace-only values count as unset."""
        monkeypatch.setenv("TERMSNAKE_LOG_FILE", "  ")
        assert load_settings().log_file is None

    def test_bad_seed(self, monkeypatch):
        """A non-integer seed is reported by name."""
        monkeypatch.setenv("TERMSNAKE_SEED", "abc")
        with pytest.raises(ValueError, match="TERMSNAKE_SEED"):
            load_settings()

    def test_bad_log_level(self, monkeypatch):
        """An unknown level name is rejected before logging is configured."""
        monkeypatch.setenv("TERMSNAKE_LOG_LEVEL", "foo")
        with pytest.raises(ValueError, match="TERMSNAKE_LOG_LEVEL"):
            load_settings()

    def test_bad_log_level_is_a_usage_error(self, monkeypatch, capsys):
        """main() reports a bad level as a usage error, without a traceback or a game."""
        monkeypatch.setenv("TERMSNAKE_LOG_LEVEL", "FOO")
        monkeypatch.setattr(main_module, "play", lambda rng=None: pytest.fail("game started"))
        with pytest.raises(SystemExit) as excinfo:
            main_module.main([])
        assert excinfo.value.code == 2
        assert "TERMSNAKE_LOG_LEVEL must be a logging level name" in capsys.readouterr().err

    def test_configure_logging_to_file(self, tmp_path, monkeypatch):
        """Records go to TERMSNAKE_LOG_FILE when it is set."""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        log_file = tmp_path / "snake.log"
        main_module.configure_logging(Settings(log_level="DEBUG", log_file=str(log_file)))
        logging.getLogger("termsnake.test").debug("hello from the test")
        for handler in root.handlers:
            handler.flush()
        assert "hello from the test" in log_file.read_text()
        for handler in root.handlers:
            handler.close()
