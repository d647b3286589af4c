"""Turn branch listings into the choices offered by the picker."""

from dataclasses import dataclass
from enum import Enum

from gitsw.utils import strip_remote_prefix

CURRENT_MARKER = "* "


class Mode(Enum):
    """Which branches the picker offers."""

    LOCAL = "local"
    REMOTE = "remote"
    ALL = "all"


TITLES = {
    Mode.LOCAL: "Select a branch to switch to:",
    Mode.REMOTE: "Select a remote branch to switch to:",
    Mode.ALL: "Select a branch to switch to:",
}


@dataclass(frozen=True)
class Choice:
    """One entry in the picker."""

    ref: str
    remote: bool = False
    current: bool = False
    disabled: bool = False

    @property
    def label(self) -> str:
        if self.current:
            return CURRENT_MARKER + self.ref
        return self.ref

    @property
    def target(self) -> str:
        """Name handed to ``git switch``."""
        if self.remote:
            return strip_remote_prefix(self.ref)
        return self.ref


@dataclass(frozen=True)
class ChoiceSet:
    choices: tuple[Choice, ...]
    default_index: int

    @property
    def selectable(self) -> list[Choice]:
        return [c for c in self.choices if not c.disabled]


class EmptyChoices(Exception):
    """Nothing to pick from. Not an error; carries a message for the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def build_choices(
    mode: Mode,
    local: list[str] | None = None,
    remote: list[str] | None = None,
    current: str | None = None,
) -> ChoiceSet:
    """
    Build the picker entries for a mode.

    The current branch is pinned first. In local mode it is shown but cannot be
    picked; in remote and all modes it can be picked but is not highlighted by
    default. Everything after it is sorted.

    Raises:
        EmptyChoices: if there is nothing (else) to switch to
    """
    local = sorted(set(local or []))
    remote = sorted(set(remote or []))

    if mode is Mode.LOCAL:
        if not local:
            raise EmptyChoices("No local branches found.")
        others = [Choice(b) for b in local if b != current]
        if not others:
            raise EmptyChoices("No other local branches to switch to.")
    elif mode is Mode.REMOTE:
        if not remote:
            raise EmptyChoices("No remote branches found.")
        others = [Choice(b, remote=True) for b in remote]
    else:
        if not local and not remote:
            raise EmptyChoices("No branches found.")
        others = [Choice(b) for b in local if b != current]
        others += [Choice(b, remote=True) for b in remote]
        if not others:
            raise EmptyChoices("No other branches to switch to.")

    choices = []
    if current:
        choices.append(Choice(current, current=True, disabled=mode is Mode.LOCAL))

    return ChoiceSet(choices=tuple(choices + others), default_index=len(choices))
