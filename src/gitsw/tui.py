"""gitsw TUI - inline branch picker."""

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from gitsw.options import Choice, ChoiceSet

logger = logging.getLogger(__name__)

MUTED = "grey35"


def render_label(choice: Choice) -> Text:
    """Render a choice, muting the current branch."""
    if choice.current:
        return Text(choice.label, style=MUTED)
    return Text(choice.label)


class BranchPicker(App[Choice | None]):
    """Single-select list of branches. Exits with the picked Choice or None."""

    CSS = """
    Screen {
        height: auto;
        background: $surface;
    }

    #title {
        padding: 0 1;
        text-style: bold;
    }

    OptionList {
        height: auto;
        max-height: 20;
        border: none;
        padding: 0 1;
    }

    #help-text {
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "cancel", "Cancel", show=False),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(self, choice_set: ChoiceSet, title: str):
        super().__init__()
        self.choice_set = choice_set
        self.prompt_title = title

    def compose(self) -> ComposeResult:
        yield Label(self.prompt_title, id="title")
        yield OptionList(
            *[
                Option(render_label(choice), id=str(index), disabled=choice.disabled)
                for index, choice in enumerate(self.choice_set.choices)
            ],
            id="branches",
        )
        yield Label("↑/↓ move • enter select • esc cancel", id="help-text")

    def on_mount(self) -> None:
        option_list = self.query_one(OptionList)
        option_list.highlighted = self.choice_set.default_index
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        choice = self.choice_set.choices[event.option_index]
        if choice.disabled:
            return
        logger.debug("Selected %s", choice.ref)
        self.exit(choice)

    def action_cancel(self) -> None:
        self.exit(None)


def prompt_for_branch(choice_set: ChoiceSet, title: str, inline: bool = True) -> Choice | None:
    """Block until the user picks a branch. None means the prompt was cancelled."""
    app = BranchPicker(choice_set, title)
    try:
        return app.run(inline=inline)
    except KeyboardInterrupt:
        return None
