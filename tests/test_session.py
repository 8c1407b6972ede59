# =============================================================================
# SessionController Tests
# =============================================================================
# The controller is exercised through messages only, the way the screen
# drives it.
# =============================================================================

import pytest

from fnf_tui.forward import ForwardCreateError, ForwardListError
from fnf_tui.session import (
    Command,
    ErrorState,
    InputState,
    KeyPress,
    ListState,
    Resize,
)

DEFAULT_EMAIL = "whatever@test.com"


def press(controller, *keys):
    for key in keys:
        command = controller.update(KeyPress(key))
    return command


def type_text(controller, text):
    for char in text:
        controller.update(KeyPress(char, char))


class TestStartup:
    def test_rows_mirror_provider_list(self, provider, make_controller):
        controller = make_controller(provider)

        assert controller.table.rows == [
            ("second@test.xyz", "two@example.com"),
            ("first@test.xyz", "one@example.com"),
        ]
        assert controller.state == ListState()

    def test_initial_list_failure_is_fatal(self, provider, make_controller):
        provider.fail_list = True

        with pytest.raises(ForwardListError):
            make_controller(provider)


class TestQuit:
    @pytest.mark.parametrize("key", ["q", "ctrl+c"])
    def test_quit_from_list(self, provider, make_controller, key):
        controller = make_controller(provider)

        assert controller.update(KeyPress(key)) is Command.QUIT

    def test_quit_from_input_and_error(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "a")
        assert press(controller, "q") is Command.QUIT

        provider.fail_list = True
        press(controller, "escape", "n")
        assert isinstance(controller.state, ErrorState)
        assert press(controller, "ctrl+c") is Command.QUIT


class TestListState:
    def test_toggle_focus_stops_navigation(self, provider, make_controller):
        controller = make_controller(provider)

        press(controller, "down")
        assert controller.table.cursor == 1

        press(controller, "escape", "up")
        assert controller.table.focused is False
        assert controller.table.cursor == 1

        press(controller, "escape", "up")
        assert controller.table.focused is True
        assert controller.table.cursor == 0

    def test_create_random_refreshes_and_resets_cursor(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "down")

        press(controller, "n")

        assert len(controller.table.rows) == 3
        assert controller.table.rows[0][1] == DEFAULT_EMAIL
        assert controller.table.cursor == 0
        assert controller.state == ListState()

    def test_create_random_failure_keeps_rows(self, provider, make_controller):
        controller = make_controller(provider)
        rows = list(controller.table.rows)
        provider.fail_create = True

        press(controller, "n")

        assert isinstance(controller.state, ErrorState)
        assert controller.table.rows == rows

    def test_copy_selected_destination(self, provider, make_controller, clipboard):
        controller = make_controller(provider)

        press(controller, "down", "c")

        assert clipboard == ["one@example.com"]
        assert controller.state == ListState()

    def test_copy_on_empty_table_is_a_noop(self, empty_provider, make_controller, clipboard):
        controller = make_controller(empty_provider)

        press(controller, "c")

        assert clipboard == []
        assert controller.state == ListState()

    def test_add_seeds_form(self, provider, make_controller):
        controller = make_controller(provider)

        press(controller, "a")

        assert isinstance(controller.state, InputState)
        form = controller.state.form
        assert form.local_part.value == ""
        assert form.destination.value == DEFAULT_EMAIL
        assert form.active == 0
        assert form.local_part.focused and not form.destination.focused


class TestDelete:
    def test_deletes_selected_by_fresh_id(self, provider, make_controller):
        controller = make_controller(provider)

        press(controller, "d")

        assert provider.deleted == ["2"]
        assert controller.table.rows == [("first@test.xyz", "one@example.com")]
        assert controller.table.cursor == 0
        assert controller.state == ListState()

    def test_row_deleted_elsewhere_is_an_error_without_delete_call(self, provider, make_controller):
        controller = make_controller(provider)
        provider.remove_behind_our_back("second@test.xyz")

        press(controller, "d")

        assert isinstance(controller.state, ErrorState)
        assert "cannot be deleted" in controller.state.message
        assert provider.deleted == []

    def test_delete_failure(self, provider, make_controller):
        controller = make_controller(provider)
        provider.fail_delete = True

        press(controller, "d")

        assert isinstance(controller.state, ErrorState)
        assert len(controller.table.rows) == 2

    def test_empty_table_is_a_noop(self, empty_provider, make_controller):
        controller = make_controller(empty_provider)
        calls = empty_provider.list_calls

        press(controller, "d")

        assert controller.state == ListState()
        assert empty_provider.list_calls == calls
        assert empty_provider.deleted == []

    def test_list_failure_after_successful_delete(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "d")
        assert controller.table.rows == [("first@test.xyz", "one@example.com")]

        provider.fail_list = True
        press(controller, "d")

        assert isinstance(controller.state, ErrorState)
        assert controller.state.lines()
        # Last good rows survive the failed refresh
        press(controller, "x")
        assert controller.state == ListState()
        assert controller.table.rows == [("first@test.xyz", "one@example.com")]


class TestInputState:
    def test_switch_wraps_and_twice_is_identity(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "a")
        form = controller.state.form

        press(controller, "tab")
        assert form.active == 1
        assert form.destination.focused and not form.local_part.focused

        press(controller, "down")
        assert form.active == 0

        press(controller, "up", "up")
        assert form.active == 0

    def test_typing_goes_to_active_field(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "a")

        type_text(controller, "shop")
        press(controller, "backspace")
        press(controller, "tab", "ctrl+u")
        type_text(controller, "me@test.com")

        form = controller.state.form
        assert form.local_part.value == "sho"
        assert form.destination.value == "me@test.com"

    def test_confirm_trims_and_creates(self, empty_provider, make_controller):
        controller = make_controller(empty_provider)
        press(controller, "a")
        type_text(controller, " foo ")
        press(controller, "tab", "ctrl+u")
        type_text(controller, "bar@example.com  ")

        press(controller, "enter")

        assert empty_provider.created == [("foo", "bar@example.com")]
        assert controller.state == ListState()
        assert controller.table.rows == [("foo@test.xyz", "bar@example.com")]
        assert controller.form.local_part.value == ""
        assert controller.form.destination.value == DEFAULT_EMAIL

    def test_confirm_resets_cursor_to_top(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "down")
        assert controller.table.cursor == 1

        press(controller, "a")
        type_text(controller, "foo")
        press(controller, "enter")

        assert controller.state == ListState()
        assert len(controller.table.rows) == 3
        assert controller.table.cursor == 0

    def test_create_failure_shows_error(self, provider, make_controller):
        controller = make_controller(provider)
        provider.fail_create = True
        press(controller, "a")
        type_text(controller, "foo")

        press(controller, "enter")

        assert isinstance(controller.state, ErrorState)
        assert len(controller.table.rows) == 2

    def test_cancel_preserves_fields(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "a")
        type_text(controller, "foo")

        press(controller, "escape")

        assert controller.state == ListState()
        assert controller.form.local_part.value == "foo"
        assert provider.created == []

    def test_focus_styling_follows_every_message(self, provider, make_controller):
        controller = make_controller(provider)
        press(controller, "a", "tab")
        form = controller.state.form
        # Tamper with styles, then send an unrelated message
        form.local_part.set_style(controller.style.focused)

        controller.update(Resize(100, 30))

        assert form.local_part.prompt_style == controller.style.blurred
        assert form.destination.prompt_style == controller.style.focused
        assert form.destination.cursor_blink is True
        assert form.local_part.cursor_blink is False


class TestErrorState:
    def _error(self, provider, make_controller, width=20):
        controller = make_controller(provider, width=width)
        provider.fail_list = True
        press(controller, "n")
        provider.fail_list = False
        return controller

    def test_message_wrapped_to_width(self, provider, make_controller):
        controller = self._error(provider, make_controller)

        lines = controller.state.lines()
        assert len(lines) > 1
        assert all(len(line) <= 20 for line in lines)

    def test_long_words_are_split_to_width(self):
        error = ForwardCreateError("Failed to create abcd@test.xyz after 3 attempts")
        state = ErrorState(error=error, width=10)

        lines = state.lines()

        assert all(len(line) <= 10 for line in lines)
        assert lines[0] == "Failed to"
        assert "".join(lines).replace(" ", "") == error.args[0].replace(" ", "")

    def test_resize_rewraps_without_dismissing(self, provider, make_controller):
        controller = self._error(provider, make_controller)

        controller.update(Resize(200, 40))

        assert isinstance(controller.state, ErrorState)
        assert controller.state.width == 200
        assert len(controller.state.lines()) == 1

    def test_any_key_returns_to_list(self, provider, make_controller):
        controller = self._error(provider, make_controller)

        press(controller, "a")

        assert controller.state == ListState()


def test_add_then_create_end_to_end(empty_provider, make_controller):
    controller = make_controller(empty_provider)
    assert controller.table.rows == []

    press(controller, "a")
    type_text(controller, "foo")
    press(controller, "tab", "ctrl+u")
    type_text(controller, "bar@example.com")
    press(controller, "enter")

    assert empty_provider.created == [("foo", "bar@example.com")]
    assert controller.table.rows == [("foo@test.xyz", "bar@example.com")]
