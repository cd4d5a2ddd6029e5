"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


# CSS class used to hide widgets
HIDDEN = "hidden"

# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
MAIN_CONTENT = "main-content"
STATUS_BAR = "status-bar"

# Templates list view IDs
TEMPLATES_VIEW = "templates-view"
TEMPLATES_LIST = "templates-list"
EMPTY_CONTAINER = "empty-container"
FAB_BUTTON = "fab-button"

# Settings (wizard) view IDs
SETTINGS_VIEW = "settings-view"
CARDS_AREA = "cards-area"
WIZARD_BUTTONS = "wizard-buttons"
WIZARD_STATUS = "wizard-status"
BACK_BTN = "back-btn"
NEXT_BTN = "next-btn"
CANCEL_BTN = "cancel-btn"

# Card input IDs
TITLE_INPUT = "title-input"
SHEET_INPUT = "sheet-input"
ROW_INPUT = "row-input"
TO_INPUT = "to-input"
CC_INPUT = "cc-input"
BCC_INPUT = "bcc-input"
SUBJECT_INPUT = "subject-input"
DOCUMENT_INPUT = "document-input"
CONDITIONAL_TOGGLE = "conditional-toggle"
CONDITIONAL_INPUT = "conditional-input"
SEND_NOW_TOGGLE = "send-now-toggle"

# Modal IDs
MODAL_TITLE = "modal-title"
MODAL_MESSAGE = "modal-message"
MODAL_BUTTONS = "modal-buttons"
CONFIRM_BTN = "confirm-btn"
DISMISS_BTN = "dismiss-btn"
PREVIEW_BODY = "preview-body"


def card_id(name: str) -> str:
    """Widget ID for the card rendering CardName value `name`."""
    return f"card-{name}"
