"""Toolbar contents: storing, restoring and editing which actions a toolbar shows."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

SEPARATOR_NAME = ".separator."
SEPARATOR_DISPLAY = "--- separator ---"
ACTION_MIME_FORMAT = "application/vnd.action.list"
DEFAULT_SETTINGS_ROOT = "/tooolbars"


@dataclass(eq=False)
class Action:
    """A user command that can be placed on a toolbar."""

    name: str = ""
    tooltip: str = ""
    icon: str | None = None
    is_separator: bool = False

    @classmethod
    def separator(cls) -> Action:
        """Create a new separator action."""
        return cls(is_separator=True)


@dataclass(eq=False)
class Toolbar:
    """A named toolbar holding an ordered list of actions."""

    name: str
    title: str = ""
    actions: list[Action] = field(default_factory=list)


def action_name(action: Action) -> str:
    """The name under which an action is stored; separators share one name."""
    return SEPARATOR_NAME if action.is_separator else action.name


def has_action(actions: Iterable[Action], action: Action) -> bool:
    """Whether an action with the same name is among actions."""
    wanted = action_name(action)
    return any(action_name(a) == wanted for a in actions)


class ActionListModel:
    """An ordered list of action names shown in the toolbar editor.

    The source model lists actions still available; it always keeps its
    separator entry, which can be dragged out any number of times.
    """

    def __init__(
        self, editor: ToolbarEditor, actions: Iterable[str], action_source: bool
    ) -> None:
        self._editor = editor
        self._actions = list(actions)
        self.action_source = action_source

    def __len__(self) -> int:
        return len(self._actions)

    @property
    def actions(self) -> list[str]:
        """A copy of the action names in display order."""
        return list(self._actions)

    def _name_at(self, row: int) -> str | None:
        if 0 <= row < len(self._actions):
            return self._actions[row]
        return None

    def display(self, row: int) -> str | None:
        """The text shown for row, or None if there is nothing to show."""
        name = self._name_at(row)
        if name is None:
            return None
        if name == SEPARATOR_NAME:
            return SEPARATOR_DISPLAY
        action = self._editor.find_action(name)
        return action.tooltip if action is not None else None

    def icon(self, row: int) -> str | None:
        """The icon shown for row, or None."""
        name = self._name_at(row)
        if name is None or name == SEPARATOR_NAME:
            return None
        action = self._editor.find_action(name)
        return action.icon if action is not None else None

    def insert_rows(self, row: int, count: int) -> bool:
        """Insert count empty entries before row."""
        self._actions[row:row] = [""] * count
        return True

    def remove_rows(self, row: int, count: int) -> bool:
        """Remove count entries starting at row; the source keeps its separator."""
        if self.action_source and self._actions[row] == SEPARATOR_NAME:
            return True
        del self._actions[row:row + count]
        return True

    def mime_data(self, rows: Sequence[int]) -> dict[str, bytes] | None:
        """Drag data for exactly one valid row, keyed by its format."""
        if len(rows) != 1:
            return None
        name = self._name_at(rows[0])
        if name is None:
            return None
        return {ACTION_MIME_FORMAT: name.encode("utf-8")}

    def drop_mime_data(self, mime_type: str, data: bytes, row: int | None = None) -> bool:
        """Insert a dropped action before row, or at the end when row is None or -1."""
        if mime_type != ACTION_MIME_FORMAT:
            return False
        if row is None or row == -1:
            row = len(self._actions)
        if not 0 <= row <= len(self._actions):
            raise IndexError(f"drop row {row} out of range")
        name = data.decode("utf-8")
        if self.action_source and name == SEPARATOR_NAME:
            return True
        self.insert_rows(row, 1)
        self._actions[row] = name
        return True


class ToolbarEditor:
    """Edits the actions of one or more toolbars, one toolbar at a time."""

    def __init__(self, allow_actions_without_icons: bool = True) -> None:
        self.allow_actions_without_icons = allow_actions_without_icons
        self._available: list[Action] = []
        self._toolbars: list[Toolbar] = []
        self._selected: dict[Toolbar, list[str]] = {}
        self.active_toolbar: Toolbar | None = None
        self.available_model: ActionListModel | None = None
        self.selected_model: ActionListModel | None = None
        self.show_toolbar_list = True

    def add_toolbar(self, toolbar: Toolbar) -> None:
        """Add a toolbar to be edited."""
        self._toolbars.append(toolbar)

    def add_toolbars(self, toolbars: Iterable[Toolbar]) -> None:
        """Add several toolbars to be edited."""
        self._toolbars.extend(toolbars)

    def set_available_actions(self, actions: Iterable[Action]) -> None:
        """Set the actions that may be placed on the toolbars."""
        self._available = list(actions)

    def find_action(self, name: str) -> Action | None:
        """The available action with this name, or None."""
        return next((a for a in self._available if action_name(a) == name), None)

    def start(self) -> list[str]:
        """Load the toolbars' actions and show the first; returns the toolbar titles."""
        if not self._toolbars:
            raise ValueError("no toolbars to edit")
        self.show_toolbar_list = len(self._toolbars) > 1
        for toolbar in self._toolbars:
            self._init_toolbar_actions(toolbar)
        self.active_toolbar = self._toolbars[0]
        self._setup_views(self.active_toolbar)
        return [toolbar.title for toolbar in self._toolbars]

    def _init_toolbar_actions(self, toolbar: Toolbar) -> None:
        selected = []
        for action in toolbar.actions:
            if action.is_separator:
                selected.append(SEPARATOR_NAME)
            elif has_action(self._available, action):
                selected.append(action_name(action))
        self._selected[toolbar] = selected

    def _setup_views(self, toolbar: Toolbar) -> None:
        if toolbar not in self._selected:
            raise ValueError("invalid toolbar")
        actions = list(self._selected[toolbar])
        available = [
            action_name(action)
            for action in self._available
            if action_name(action) not in actions
            and (self.allow_actions_without_icons or action.icon)
        ]
        if SEPARATOR_NAME not in available:
            available.append(SEPARATOR_NAME)
        self.available_model = ActionListModel(self, available, True)
        self.selected_model = ActionListModel(self, actions, False)
        self.active_toolbar = toolbar

    def _update_toolbar_actions(self, toolbar: Toolbar | None) -> None:
        if toolbar is None or toolbar not in self._selected or self.selected_model is None:
            raise ValueError("invalid toolbar")
        self._selected[toolbar] = self.selected_model.actions

    def select_toolbar(self, index: int) -> None:
        """Keep the edits of the shown toolbar and switch to the one at index."""
        if index == -1:
            return
        selected = self._toolbars[index]
        if selected is self.active_toolbar:
            return
        self._update_toolbar_actions(self.active_toolbar)
        self._setup_views(selected)

    def actions_for_toolbar(self, toolbar: Toolbar) -> list[str]:
        """The action names chosen for toolbar, or an empty list."""
        return list(self._selected.get(toolbar, []))

    def accept(self) -> None:
        """Keep the edits of the shown toolbar and release the views."""
        self._update_toolbar_actions(self.active_toolbar)
        self.available_model = None
        self.selected_model = None


class ToolbarManager:
    """Keeps managed toolbars and stores their contents in settings."""

    def __init__(self, settings_root: str = DEFAULT_SETTINGS_ROOT) -> None:
        self.settings_root = settings_root
        self._available: list[Action] = []
        self.toolbars: list[Toolbar] = []

    @property
    def available_actions(self) -> list[Action]:
        """A copy of the actions that may appear on toolbars."""
        return list(self._available)

    def set_available_actions(self, actions: Iterable[Action]) -> None:
        """Set the actions that may appear on toolbars."""
        self._available = list(actions)

    def query_available_actions(self, objects: Iterable[object]) -> None:
        """Take as available every object that is exactly an Action."""
        self._available = [obj for obj in objects if type(obj) is Action]

    def add_managed(self, toolbar: Toolbar) -> None:
        """Manage a toolbar."""
        self.toolbars.append(toolbar)

    def apply_actions(self, toolbar: Toolbar, names: Iterable[str]) -> None:
        """Replace the toolbar's actions with the named ones; unknown names are skipped."""
        actions = []
        for name in names:
            if name == SEPARATOR_NAME:
                actions.append(Action.separator())
                continue
            action = next((a for a in self._available if action_name(a) == name), None)
            if action is not None:
                actions.append(action)
        toolbar.actions = actions

    def _key(self, toolbar: Toolbar) -> str:
        return self.settings_root + toolbar.name

    def load(self, settings: Mapping[str, Sequence[str]]) -> None:
        """Restore toolbars that have stored contents; leave the others intact."""
        if not self._available:
            logger.warning(
                "available action list is empty, were the available actions set?"
            )
        for toolbar in self.toolbars:
            key = self._key(toolbar)
            if key in settings:
                self.apply_actions(toolbar, settings[key])

    def save(self, settings: MutableMapping[str, list[str]]) -> None:
        """Store the contents of every managed toolbar."""
        for toolbar in self.toolbars:
            names = []
            for action in toolbar.actions:
                if action.is_separator:
                    names.append(SEPARATOR_NAME)
                elif has_action(self._available, action):
                    names.append(action_name(action))
            settings[self._key(toolbar)] = names

    def create_editor(self) -> ToolbarEditor:
        """An editor set up with the available actions and managed toolbars."""
        editor = ToolbarEditor()
        editor.set_available_actions(self._available)
        editor.add_toolbars(self.toolbars)
        return editor

    def apply_editor(self, editor: ToolbarEditor) -> None:
        """Apply the contents chosen in an accepted editor to every managed toolbar."""
        for toolbar in self.toolbars:
            self.apply_actions(toolbar, editor.actions_for_toolbar(toolbar))