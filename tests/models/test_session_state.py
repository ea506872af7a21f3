"""Unit tests for SessionState.

This test suite covers:
1. Creation and the banner transcript
2. Prompt text and home-relative display paths
3. Command recall (previous/next) cursor arithmetic
4. Interrupting the input line
5. History size limits and snapshots
"""

import pytest
from pydantic import ValidationError

from models.config import DEFAULT_BANNER, ShellConfig
from models.session import CommandRecord, OutputRecord, Privilege, SessionState
from tests.fixtures.shell import create_session_state


class TestSessionStateCreation:
    """Test SessionState.create()."""

    def test_starts_in_home_with_banner(self):
        state = SessionState.create()

        assert state.current_path == "/home/user"
        assert state.privilege == Privilege.STANDARD
        assert state.transcript == tuple(OutputRecord(text=line) for line in DEFAULT_BANNER)
        assert state.command_history == ()
        assert state.recall_index == -1
        assert state.input_buffer == ""

    def test_uses_configured_home(self):
        state = SessionState.create(ShellConfig(home_path="/sdcard"))
        assert state.current_path == "/sdcard"
        assert state.display_path == "~"

    def test_state_is_frozen(self):
        state = SessionState.create()
        with pytest.raises(ValidationError):
            state.current_path = "/"

    def test_recall_index_lower_bound(self):
        with pytest.raises(ValidationError):
            SessionState(recall_index=-2)


class TestPrompt:
    """Test prompt_text and display_path."""

    @pytest.mark.parametrize(
        "current_path, expected",
        [
            ("/home/user", "~"),
            ("/home/user/notes", "~/notes"),
            ("/home/user/a/b", "~/a/b"),
            ("/home", "/home"),
            ("/home/username", "/home/username"),
            ("/", "/"),
            ("/sdcard/Download", "/sdcard/Download"),
        ],
    )
    def test_display_path(self, current_path, expected):
        """Test that only the home directory and its descendants are abbreviated."""
        assert create_session_state(current_path=current_path).display_path == expected

    def test_root_home_is_not_abbreviated(self):
        state = create_session_state(current_path="/system", config=ShellConfig(home_path="/"))
        assert state.display_path == "/system"

    def test_standard_prompt(self):
        assert create_session_state().prompt_text == "user@localhost:~$ "

    def test_elevated_prompt(self):
        state = create_session_state(current_path="/system", privilege=Privilege.ELEVATED)
        assert state.prompt_text == "root@localhost:/system# "

    def test_configured_identity_and_host(self):
        config = ShellConfig(user_name="alice", root_name="admin", host_label="pixel")
        assert create_session_state(config=config).prompt_text == "alice@pixel:~$ "
        elevated = create_session_state(config=config, privilege=Privilege.ELEVATED)
        assert elevated.identity == "admin"
        assert elevated.prompt_text == "admin@pixel:~# "


class TestRecordCommand:
    """Test record_command()."""

    def test_appends_history_and_transcript(self):
        state = create_session_state().with_input("ls").record_command("ls")

        assert state.command_history == ("ls",)
        assert state.transcript == (CommandRecord(prompt_text="user@localhost:~$ ", text="ls"),)
        assert state.input_buffer == ""
        assert state.recall_index == -1

    def test_duplicates_are_kept(self):
        state = create_session_state().record_command("ls").record_command("ls")
        assert state.command_history == ("ls", "ls")

    def test_history_limit(self):
        state = create_session_state(config=ShellConfig(max_history_size=2))
        for line in ("a", "b", "c"):
            state = state.record_command(line)

        assert state.command_history == ("b", "c")
        assert len(state.transcript) == 3

    def test_original_state_untouched(self):
        state = create_session_state()
        state.record_command("pwd")
        assert state.command_history == ()
        assert state.transcript == ()


class TestRecall:
    """Test recall_previous() and recall_next()."""

    @pytest.fixture
    def state(self):
        return create_session_state(command_history=("first", "second", "third"))

    def test_previous_loads_newest_first(self, state):
        state = state.recall_previous()
        assert state.recall_index == 0
        assert state.input_buffer == "third"

        state = state.recall_previous()
        assert state.recall_index == 1
        assert state.input_buffer == "second"

    def test_previous_saturates_at_oldest(self, state):
        for _ in range(10):
            state = state.recall_previous()
        assert state.recall_index == 2
        assert state.input_buffer == "first"

    def test_next_moves_towards_newest(self, state):
        state = state.recall_previous().recall_previous().recall_previous()
        state = state.recall_next()
        assert state.recall_index == 1
        assert state.input_buffer == "second"

    def test_next_past_newest_clears_input(self, state):
        state = state.recall_previous().recall_next()
        assert state.recall_index == -1
        assert state.input_buffer == ""

    def test_next_when_not_recalling_is_noop(self, state):
        state = state.with_input("typing")
        assert state.recall_next() is state

    def test_previous_with_empty_history_is_noop(self):
        state = create_session_state().with_input("typing")
        assert state.recall_previous() is state

    def test_recall_does_not_touch_transcript(self, state):
        assert state.recall_previous().transcript == state.transcript


class TestInterrupt:
    """Test interrupt()."""

    def test_records_pending_input_with_marker(self):
        state = create_session_state().with_input("rm -rf /").interrupt()

        assert state.transcript == (
            CommandRecord(prompt_text="user@localhost:~$ ", text="rm -rf /^C"),
        )
        assert state.input_buffer == ""
        assert state.command_history == ()

    def test_explicit_pending_input(self):
        state = create_session_state().with_input("ignored").interrupt("typed")
        assert state.transcript[-1].text == "typed^C"

    def test_empty_input(self):
        state = create_session_state().interrupt()
        assert state.transcript[-1].text == "^C"

    def test_resets_recall(self):
        state = create_session_state(command_history=("ls",)).recall_previous().interrupt()
        assert state.recall_index == -1
        assert state.transcript[-1].text == "ls^C"
        assert state.command_history == ("ls",)


class TestSnapshot:
    """Test get_snapshot()."""

    def test_snapshot_contents(self):
        state = SessionState.create().record_command("pwd").append(OutputRecord(text="/home/user"))
        snapshot = state.get_snapshot()

        assert snapshot["current_path"] == "/home/user"
        assert snapshot["display_path"] == "~"
        assert snapshot["privilege"] == "standard"
        assert snapshot["identity"] == "user"
        assert snapshot["prompt"] == "user@localhost:~$ "
        assert snapshot["command_history"] == ["pwd"]
        assert snapshot["recall_index"] == -1
        assert snapshot["transcript"][-2] == {
            "kind": "command",
            "prompt_text": "user@localhost:~$ ",
            "text": "pwd",
        }
        assert snapshot["transcript"][-1] == {
            "kind": "output",
            "text": "/home/user",
            "is_error": False,
            "error_kind": None,
        }

    def test_append_nothing_returns_self(self):
        state = create_session_state()
        assert state.append() is state
