import pytest

from aircleaner.navigation import (
    GAME_TITLE,
    ActionButton,
    Grid,
    Header,
    Key,
    Menu,
    Navigator,
    Screen,
    VolumeControl,
    menu_layout,
)


def in_gameplay() -> Navigator:
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    nav.activate("Play")
    return nav


def test_initial_state():
    nav = Navigator()
    assert (nav.screen, nav.menu, nav.paused) == (Screen.SPLASH, Menu.NONE, False)


def test_title_opens_main_menu():
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    assert nav.menu is Menu.MAIN


def test_play_enters_gameplay_and_closes_menu():
    nav = in_gameplay()
    assert nav.screen is Screen.GAMEPLAY
    assert nav.menu is Menu.NONE


@pytest.mark.parametrize("key", [Key.P, Key.ESCAPE])
def test_pause_key_opens_pause_menu(key):
    nav = in_gameplay()
    nav.press_key(key)
    assert nav.paused is True
    assert nav.overlay_visible is True
    assert nav.menu is Menu.PAUSE


def test_p_closes_pause_menu_and_unpauses():
    nav = in_gameplay()
    nav.press_key(Key.P)
    nav.press_key(Key.P)
    assert nav.menu is Menu.NONE
    assert nav.paused is False


def test_escape_closes_pause_menu():
    nav = in_gameplay()
    nav.press_key(Key.ESCAPE)
    nav.press_key(Key.ESCAPE)
    assert nav.menu is Menu.NONE
    assert nav.paused is False


def test_continue_unpauses():
    nav = in_gameplay()
    nav.press_key(Key.P)
    nav.activate("Continue")
    assert (nav.menu, nav.paused) == (Menu.NONE, False)


def test_settings_back_returns_to_pause_in_gameplay():
    nav = in_gameplay()
    nav.press_key(Key.P)
    nav.activate("Settings")
    assert nav.menu is Menu.SETTINGS
    nav.press_key(Key.ESCAPE)
    assert nav.menu is Menu.PAUSE
    assert nav.paused is True


def test_settings_back_returns_to_main_on_title():
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    nav.activate("Settings")
    nav.activate("Back")
    assert nav.menu is Menu.MAIN


def test_p_closes_settings_in_gameplay():
    nav = in_gameplay()
    nav.press_key(Key.P)
    nav.activate("Settings")
    nav.press_key(Key.P)
    assert (nav.menu, nav.paused) == (Menu.NONE, False)


def test_quit_to_title():
    nav = in_gameplay()
    nav.press_key(Key.P)
    nav.activate("Quit to title")
    assert nav.screen is Screen.TITLE
    assert nav.menu is Menu.MAIN
    assert nav.paused is False


def test_credits_back_and_escape():
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    nav.activate("Credits")
    assert nav.menu is Menu.CREDITS
    nav.press_key(Key.ESCAPE)
    assert nav.menu is Menu.MAIN
    nav.activate("Credits")
    nav.activate("Back")
    assert nav.menu is Menu.MAIN


def test_exit_requests_exit():
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    nav.activate("Exit")
    assert nav.exit_requested is True


def test_pause_keys_ignored_on_title():
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    nav.press_key(Key.P)
    assert (nav.menu, nav.paused) == (Menu.MAIN, False)


def test_unknown_button_raises():
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    with pytest.raises(ValueError):
        nav.activate("Continue")


def test_no_buttons_without_menu():
    nav = Navigator()
    with pytest.raises(ValueError):
        nav.activate("Play")


def test_volume_buttons():
    nav = Navigator()
    nav.set_screen(Screen.TITLE)
    nav.activate("Settings")
    start = nav.volume.linear
    nav.activate("+")
    assert nav.volume.linear > start
    for _ in range(50):
        nav.activate("-")
    assert nav.volume.linear == 0.0


def test_listeners_report_transitions():
    screens = []
    menus = []
    nav = Navigator(
        on_screen_change=lambda old, new: screens.append((old, new)),
        on_menu_change=lambda old, new: menus.append((old, new)),
    )
    nav.set_screen(Screen.TITLE)
    nav.activate("Play")
    assert screens == [
        (Screen.SPLASH, Screen.TITLE),
        (Screen.TITLE, Screen.GAMEPLAY),
    ]
    assert menus == [(Menu.NONE, Menu.MAIN), (Menu.MAIN, Menu.NONE)]


def test_same_screen_is_no_transition():
    calls = []
    nav = Navigator(on_screen_change=lambda old, new: calls.append(new))
    nav.set_screen(Screen.SPLASH)
    assert calls == []


def test_main_menu_layout():
    layout = menu_layout(Menu.MAIN)
    assert layout.items[0] == Header(GAME_TITLE)
    assert layout.buttons == ["Play", "Settings", "Credits", "Exit"]


def test_pause_menu_layout():
    layout = menu_layout(Menu.PAUSE)
    assert layout.items[0] == Header("Game paused")
    assert layout.buttons == ["Continue", "Settings", "Quit to title"]


def test_settings_layout_has_volume_control():
    layout = menu_layout(Menu.SETTINGS)
    assert VolumeControl() in layout.items
    assert layout.buttons == ["Back"]


def test_credits_layout_structure():
    layout = menu_layout(Menu.CREDITS)
    headers = [item.text for item in layout.items if isinstance(item, Header)]
    assert headers == ["Created by", "Assets"]
    grids = [item for item in layout.items if isinstance(item, Grid)]
    assert len(grids) == 2
    assert all(len(row) == 2 for grid in grids for row in grid.rows)
    assert layout.items[-1] == ActionButton("Back")


def test_none_layout_is_empty():
    assert menu_layout(Menu.NONE).items == ()