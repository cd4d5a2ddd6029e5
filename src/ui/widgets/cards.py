"""Input cards for the merge template wizard.

Each card is a Textual container that also implements the CardController
capabilities the WizardController relies on. Cards are shown and hidden
with the `hidden` CSS class.
"""

from __future__ import annotations

from typing import Any, Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Checkbox, Input, Label, Static

from constants import CardName
from controller import CardController, CardRegistry, ToggleableCard
from ui.ids import css
import ui.ids as ids

# Turns (input text, value last loaded into the card) into the card value
ValueTransform = Callable[[str, Any], Any]


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _keep_loaded(text: str, loaded: Any) -> Any:
    """Return the loaded value while the input still shows it, else the text.

    Keeps None and numbers intact for fields the user didn't touch.
    """
    if text == _as_text(loaded):
        return loaded
    return text


def keep_int(text: str, loaded: Any) -> Any:
    """Like _keep_loaded, but an edited number stays a number."""
    value = _keep_loaded(text, loaded)
    if isinstance(loaded, int) and not isinstance(loaded, bool) and text.isdigit():
        return int(text)
    return value


class _Card(Container):
    """Title and help text shared by every card."""

    def __init__(self, card_name: CardName, title: str, help_text: str) -> None:
        super().__init__(id=ids.card_id(card_name.value), classes="card")
        self.card_name = card_name
        self._title = title
        self._help = help_text

    def compose_header(self) -> ComposeResult:
        yield Label(self._title, classes="card-title")
        yield Static(self._help, classes="card-help")

    def show(self) -> None:
        self.remove_class(ids.HIDDEN)

    def hide(self) -> None:
        self.add_class(ids.HIDDEN)


class InputCard(_Card, CardController):
    """A card holding a single line of text."""

    def __init__(
        self,
        card_name: CardName,
        title: str,
        help_text: str,
        input_id: str,
        placeholder: str = "",
        restrict: str | None = None,
        value_transform: ValueTransform = _keep_loaded,
    ) -> None:
        super().__init__(card_name, title, help_text)
        self._input = Input(placeholder=placeholder, id=input_id, restrict=restrict)
        self._value_transform = value_transform
        self._loaded_value: Any = None

    def compose(self) -> ComposeResult:
        yield from self.compose_header()
        yield self._input

    def get_value(self) -> Any:
        return self._value_transform(self._input.value, self._loaded_value)

    def set_value(self, value: Any) -> None:
        self._loaded_value = value
        self._input.value = _as_text(value)


class RecipientsCard(_Card, CardController):
    """To, CC and BCC. Values may contain <<column>> tags."""

    def __init__(self) -> None:
        super().__init__(
            CardName.TO,
            "Recipients",
            "Who should receive each email? Use <<Column Name>> to pull an address from the sheet.",
        )
        self._to = Input(placeholder="To", id=ids.TO_INPUT)
        self._cc = Input(placeholder="CC", id=ids.CC_INPUT)
        self._bcc = Input(placeholder="BCC", id=ids.BCC_INPUT)
        self._loaded_value: dict[str, Any] = {}

    def compose(self) -> ComposeResult:
        yield from self.compose_header()
        yield self._to
        yield self._cc
        yield self._bcc

    def get_value(self) -> dict[str, Any]:
        return {
            "to": _keep_loaded(self._to.value, self._loaded_value.get("to")),
            "cc": _keep_loaded(self._cc.value, self._loaded_value.get("cc")),
            "bcc": _keep_loaded(self._bcc.value, self._loaded_value.get("bcc")),
        }

    def set_value(self, value: Any) -> None:
        self._loaded_value = dict(value or {})
        self._to.value = _as_text(self._loaded_value.get("to"))
        self._cc.value = _as_text(self._loaded_value.get("cc"))
        self._bcc.value = _as_text(self._loaded_value.get("bcc"))


class DocumentCard(_Card, CardController):
    """Selects the document used as the email body.

    set_value takes {"id": document_id}; get_value returns the bare id.
    """

    def __init__(self) -> None:
        super().__init__(
            CardName.DOCUMENT_SELECTOR,
            "Document",
            "The id (or URL) of the document to merge into each email.",
        )
        self._input = Input(placeholder="Document id", id=ids.DOCUMENT_INPUT)
        self._loaded_value: Any = None

    def compose(self) -> ComposeResult:
        yield from self.compose_header()
        yield self._input

    def get_value(self) -> Any:
        return _keep_loaded(self._input.value, self._loaded_value)

    def set_value(self, value: Any) -> None:
        self._loaded_value = value.get("id") if isinstance(value, dict) else value
        self._input.value = _as_text(self._loaded_value)


class ConditionalCard(_Card, ToggleableCard):
    """Optional column filter. Only rows matching the condition are merged."""

    def __init__(self) -> None:
        super().__init__(
            CardName.CONDITIONAL,
            "Conditional",
            "Only send when the named column is true for a row.",
        )
        self._toggle = Checkbox("Send conditionally", value=False, id=ids.CONDITIONAL_TOGGLE)
        self._input = Input(placeholder="<<Column Name>>", id=ids.CONDITIONAL_INPUT, disabled=True)

    def compose(self) -> ComposeResult:
        yield from self.compose_header()
        yield self._toggle
        yield self._input

    @on(Checkbox.Changed, css(ids.CONDITIONAL_TOGGLE))
    def on_toggle_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self._input.disabled = not event.value

    def check(self) -> None:
        self._toggle.value = True
        self._input.disabled = False

    def uncheck(self) -> None:
        self._toggle.value = False
        self._input.disabled = True

    def is_enabled(self) -> bool:
        return self._toggle.value

    def get_value(self) -> str | None:
        if not self.is_enabled():
            return None
        return self._input.value

    def set_value(self, value: Any) -> None:
        self._input.value = "" if value is None else str(value)


class SendNowCard(_Card, CardController):
    """Last card: optionally run the template as soon as it is saved."""

    def __init__(self) -> None:
        super().__init__(
            CardName.SEND_NOW,
            "All set",
            "Press Save to store this template.",
        )
        self._toggle = Checkbox("Run immediately after saving", value=False, id=ids.SEND_NOW_TOGGLE)

    def compose(self) -> ComposeResult:
        yield from self.compose_header()
        yield self._toggle

    def get_value(self) -> bool:
        return self._toggle.value

    def set_value(self, value: Any) -> None:
        self._toggle.value = bool(value)


def build_card_registry() -> CardRegistry:
    """Create one card per CardName."""
    return CardRegistry({
        CardName.TITLE: InputCard(
            CardName.TITLE,
            "Title",
            "A name for this merge template.",
            ids.TITLE_INPUT,
            placeholder="Monthly newsletter",
        ),
        CardName.SHEET: InputCard(
            CardName.SHEET,
            "Sheet",
            "The sheet holding one row per recipient.",
            ids.SHEET_INPUT,
            placeholder="Sheet1",
        ),
        CardName.ROW: InputCard(
            CardName.ROW,
            "Header row",
            "The row number of the column headers.",
            ids.ROW_INPUT,
            placeholder="1",
            restrict=r"[0-9]*",
            value_transform=keep_int,
        ),
        CardName.TO: RecipientsCard(),
        CardName.SUBJECT: InputCard(
            CardName.SUBJECT,
            "Subject",
            "The email subject. <<Column Name>> tags are replaced per row.",
            ids.SUBJECT_INPUT,
            placeholder="Hello <<First Name>>",
        ),
        CardName.DOCUMENT_SELECTOR: DocumentCard(),
        CardName.CONDITIONAL: ConditionalCard(),
        CardName.SEND_NOW: SendNowCard(),
    })
