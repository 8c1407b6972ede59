# =============================================================================
# Session Controller
# =============================================================================
# The state machine behind the forward list UI.
#
#   ListState  --a-->      InputState
#   InputState --enter-->  ListState   (create ok)  | ErrorState (failure)
#   InputState --escape--> ListState   (form kept)
#   ListState  --n/d-->    ListState   (remote ok)  | ErrorState (failure)
#   ErrorState --any key-> ListState
#
# Quit keys end the session from every state.
#
# One message is handled to completion, remote calls included, before the
# next one is accepted. The table only changes after a successful read, so
# a failed refresh leaves the last good rows in place.
# =============================================================================

import logging
from typing import Callable

from fnf_tui.core import ForwardingRule, create_rows
from fnf_tui.forward import ForwardError, ForwardProvider
from fnf_tui.session.components import Table
from fnf_tui.session.state import (
    Command,
    ErrorState,
    InputForm,
    InputState,
    KeyMap,
    KeyPress,
    ListState,
    Message,
    Resize,
    SessionState,
    SessionStyle,
)

logger = logging.getLogger(__name__)


class SessionController:
    """
    Drives the forward list session.

    Usage:
        >>> controller = SessionController(provider, "me@example.org", clipboard=print)
        >>> controller.update(KeyPress("a"))
        >>> isinstance(controller.state, InputState)
        True

    Attributes:
        state: The current state.
        table: Table model (rows, cursor, focus). Kept across states.
        form: Creation form. Kept across states so a cancel preserves it.
        width: Last known viewport width.
    """

    def __init__(
        self,
        provider: ForwardProvider,
        default_email: str,
        *,
        clipboard: Callable[[str], None],
        width: int = 80,
        style: SessionStyle | None = None,
        keymap: KeyMap | None = None,
    ) -> None:
        """
        Initialize the controller and load the rules.

        Args:
            provider: Remote forwarding provider.
            default_email: Destination seeded into the form.
            clipboard: Called with text to copy.
            width: Initial viewport width.
            style: Per-session visual settings.
            keymap: Key bindings.

        Raises:
            ForwardError: If the initial list fails. There is no error state
                          at startup.
        """
        self._provider = provider
        self._default_email = default_email
        self._clipboard = clipboard
        self.style = style or SessionStyle()
        self.keys = keymap or KeyMap()
        self.width = width

        self.table = Table(height=self.style.table_height)
        self.table.resize(width)
        self.form = InputForm()
        for text_field in self.form.fields:
            text_field.cursor_style = self.style.cursor

        self.table.set_rows(create_rows(provider.list()))
        self.state: SessionState = ListState()

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def update(self, message: Message) -> Command | None:
        """
        Process one message.

        Args:
            message: A KeyPress or Resize.

        Returns:
            Command.QUIT when the session must end, otherwise None.
        """
        if isinstance(message, Resize):
            self.width = message.width
            self.table.resize(message.width)

        if isinstance(message, KeyPress) and message.key in self.keys.quit:
            return Command.QUIT

        match self.state:
            case ListState():
                self._update_list(message)
            case InputState(form=form):
                self._update_input(form, message)
            case ErrorState() as error_state:
                self._update_error(error_state, message)
        return None

    def _fail(self, error: Exception) -> None:
        logger.error(f"Session error: {error}")
        self.state = ErrorState(error=error, width=self.width)

    def _refresh(self, rules: list[ForwardingRule]) -> None:
        self.table.set_rows(create_rows(rules))
        self.table.goto_top()

    # -------------------------------------------------------------------------
    # List State
    # -------------------------------------------------------------------------

    def _update_list(self, message: Message) -> None:
        if isinstance(message, Resize):
            return

        key = message.key
        if key in self.keys.toggle_focus:
            self.table.toggle_focus()
        elif key in self.keys.create_random:
            self._create_random()
        elif key in self.keys.copy:
            self._copy_destination()
        elif key in self.keys.add:
            self.form.reset(self._default_email)
            self.form.active = 0
            self.state = InputState(form=self.form)
            self._apply_focus(self.form)
        elif key in self.keys.delete:
            self._delete_selected()
        else:
            self.table.handle_key(key)

    def _create_random(self) -> None:
        try:
            local_part = self._provider.create_on_default_email()
            logger.info(f"Created random redirection {local_part}")
            rules = self._provider.list()
        except ForwardError as e:
            self._fail(e)
            return
        self._refresh(rules)

    def _copy_destination(self) -> None:
        row = self.table.selected_row()
        if row is None:
            return
        self._clipboard(row[1])
        logger.debug(f"Copied {row[1]} to clipboard")

    def _delete_selected(self) -> None:
        row = self.table.selected_row()
        if row is None:
            return
        source = row[0]

        # Work on a fresh list so we never delete with a stale id
        try:
            rules = self._provider.list()
        except ForwardError as e:
            self._fail(e)
            return

        target = next((rule for rule in rules if rule.source == source), None)
        if target is None:
            self._fail(ForwardError(f"entry {source} cannot be deleted"))
            return

        try:
            self._provider.delete(target.id)
        except ForwardError as e:
            self._fail(e)
            return

        logger.info(f"Deleted {source}")
        self._refresh([rule for rule in rules if rule.source != source])

    # -------------------------------------------------------------------------
    # Input State
    # -------------------------------------------------------------------------

    def _update_input(self, form: InputForm, message: Message) -> None:
        if isinstance(message, KeyPress):
            key = message.key
            if key in self.keys.switch_field:
                form.switch()
            elif key in self.keys.confirm:
                self._submit(form)
            elif key in self.keys.cancel:
                self.state = ListState()
            else:
                form.active_field.handle_key(key, message.text)

        # Styling follows the active index after every message
        if isinstance(self.state, InputState):
            self._apply_focus(form)

    def _apply_focus(self, form: InputForm) -> None:
        for index, text_field in enumerate(form.fields):
            if index == form.active:
                text_field.focus()
                text_field.set_style(self.style.focused)
                text_field.cursor_blink = True
            else:
                text_field.blur()
                text_field.set_style(self.style.blurred)
                text_field.cursor_blink = False

    def _submit(self, form: InputForm) -> None:
        local_part, destination = form.values()
        try:
            self._provider.create(local_part, destination)
        except ForwardError as e:
            self._fail(e)
            return

        form.reset(self._default_email)
        try:
            rules = self._provider.list()
        except ForwardError as e:
            self._fail(e)
            return
        self._refresh(rules)
        self.state = ListState()

    # -------------------------------------------------------------------------
    # Error State
    # -------------------------------------------------------------------------

    def _update_error(self, error_state: ErrorState, message: Message) -> None:
        if isinstance(message, Resize):
            error_state.width = message.width
            return
        self.state = ListState()
