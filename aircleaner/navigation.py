"""Screens, menus and the transitions between them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Union

from .audio import GlobalVolume

GAME_TITLE = "A Lightning Air Cleaner"
CREDITS_MUSIC = "Monkeys Spinning Monkeys.ogg"
MASTER_VOLUME_LABEL = "Master Volume"

CREATED_BY: tuple[tuple[str, str], ...] = (("The developer", "Creator"),)
ASSET_CREDITS: tuple[tuple[str, str], ...] = (
    ("UI pack", "CC0"),
    ("Ducky sprite", "CC0"),
    ("Button SFX", "CC0"),
    ("Music", "CC BY 3.0"),
    ("Splash logo", "Used unmodified with permission"),
)


class Screen(enum.Enum):
    """The game's main screens."""

    SPLASH = "splash"
    TITLE = "title"
    GAMEPLAY = "gameplay"


class Menu(enum.Enum):
    """The menu shown on top of the current screen."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"


class Key(enum.Enum):
    """Keys that drive navigation."""

    ESCAPE = "escape"
    P = "p"


@dataclass(frozen=True)
class Header:
    """A large heading line."""

    text: str


@dataclass(frozen=True)
class Grid:
    """Two-column rows; the left column is right-aligned, the right left-aligned."""

    rows: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class VolumeControl:
    """A label with "-" and "+" buttons around the current master volume."""

    label: str = MASTER_VOLUME_LABEL


@dataclass(frozen=True)
class ActionButton:
    """A large button that triggers a menu action."""

    label: str


MenuItem = Union[Header, Grid, VolumeControl, ActionButton]


@dataclass(frozen=True)
class MenuLayout:
    """What a menu shows, from top to bottom."""

    name: str
    items: tuple[MenuItem, ...]

    @property
    def buttons(self) -> list[str]:
        """Labels of the menu's action buttons, in order."""
        return [item.label for item in self.items if isinstance(item, ActionButton)]


_LAYOUTS: dict[Menu, MenuLayout] = {
    Menu.NONE: MenuLayout("", ()),
    Menu.MAIN: MenuLayout(
        "Main Menu",
        (
            Header(GAME_TITLE),
            ActionButton("Play"),
            ActionButton("Settings"),
            ActionButton("Credits"),
            ActionButton("Exit"),
        ),
    ),
    Menu.CREDITS: MenuLayout(
        "Credits Menu",
        (
            Header("Created by"),
            Grid(CREATED_BY),
            Header("Assets"),
            Grid(ASSET_CREDITS),
            ActionButton("Back"),
        ),
    ),
    Menu.SETTINGS: MenuLayout(
        "Settings Menu",
        (Header("Settings"), VolumeControl(), ActionButton("Back")),
    ),
    Menu.PAUSE: MenuLayout(
        "Pause Menu",
        (
            Header("Game paused"),
            ActionButton("Continue"),
            ActionButton("Settings"),
            ActionButton("Quit to title"),
        ),
    ),
}


def menu_layout(menu: Menu) -> MenuLayout:
    """The layout of ``menu``; Menu.NONE has no items."""
    return _LAYOUTS[menu]


ScreenListener = Callable[[Screen, Screen], None]
MenuListener = Callable[[Menu, Menu], None]


@dataclass
class Navigator:
    """Tracks the current screen, menu and pause state and applies transitions."""

    screen: Screen = Screen.SPLASH
    menu: Menu = Menu.NONE
    paused: bool = False
    exit_requested: bool = False
    volume: GlobalVolume = field(default_factory=GlobalVolume)
    on_screen_change: ScreenListener | None = None
    on_menu_change: MenuListener | None = None

    @property
    def overlay_visible(self) -> bool:
        """Whether the darkening pause overlay is shown."""
        return self.paused

    def set_screen(self, screen: Screen) -> None:
        """Switch to ``screen``, running its exit and enter actions."""
        old = self.screen
        if screen is old:
            return
        self.screen = screen
        next_menu: Menu | None = None
        if old is Screen.TITLE:
            next_menu = Menu.NONE
        elif old is Screen.GAMEPLAY:
            next_menu = Menu.NONE
            self.paused = False
        if screen is Screen.TITLE:
            next_menu = Menu.MAIN
        if self.on_screen_change is not None:
            self.on_screen_change(old, screen)
        if next_menu is not None:
            self.set_menu(next_menu)

    def set_menu(self, menu: Menu) -> None:
        """Switch to ``menu``; closing all menus during gameplay unpauses."""
        old = self.menu
        if menu is old:
            return
        self.menu = menu
        if menu is Menu.NONE and self.screen is Screen.GAMEPLAY:
            self.paused = False
        if self.on_menu_change is not None:
            self.on_menu_change(old, menu)

    def _settings_back(self) -> Menu:
        return Menu.MAIN if self.screen is Screen.TITLE else Menu.PAUSE

    def press_key(self, key: Key) -> None:
        """React to a key press on the current screen and menu."""
        screen, menu = self.screen, self.menu
        if screen is Screen.GAMEPLAY and menu is Menu.NONE:
            if key in (Key.P, Key.ESCAPE):
                self.paused = True
                self.set_menu(Menu.PAUSE)
            return
        if screen is Screen.GAMEPLAY and key is Key.P:
            self.set_menu(Menu.NONE)
            return
        if key is not Key.ESCAPE:
            return
        if menu is Menu.CREDITS:
            self.set_menu(Menu.MAIN)
        elif menu is Menu.PAUSE:
            self.set_menu(Menu.NONE)
        elif menu is Menu.SETTINGS:
            self.set_menu(self._settings_back())

    def activate(self, label: str) -> None:
        """Click the button labelled ``label`` in the current menu.

        Raises ValueError if the current menu has no such button.
        """
        menu = self.menu
        allowed = menu_layout(menu).buttons
        if menu is Menu.SETTINGS:
            allowed = allowed + ["-", "+"]
        if label not in allowed:
            raise ValueError(f"menu {menu.value!r} has no button {label!r}")
        match menu, label:
            case Menu.MAIN, "Play":
                self.set_screen(Screen.GAMEPLAY)
            case Menu.MAIN | Menu.PAUSE, "Settings":
                self.set_menu(Menu.SETTINGS)
            case Menu.MAIN, "Credits":
                self.set_menu(Menu.CREDITS)
            case Menu.MAIN, "Exit":
                self.exit_requested = True
            case Menu.CREDITS, "Back":
                self.set_menu(Menu.MAIN)
            case Menu.SETTINGS, "Back":
                self.set_menu(self._settings_back())
            case Menu.SETTINGS, "-":
                self.volume.decrease()
            case Menu.SETTINGS, "+":
                self.volume.increase()
            case Menu.PAUSE, "Continue":
                self.set_menu(Menu.NONE)
            case Menu.PAUSE, "Quit to title":
                self.set_screen(Screen.TITLE)