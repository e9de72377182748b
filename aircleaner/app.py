"""The game window: screens, menus, gameplay HUD and the main loop."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import pygame

from .audio import AudioPlayer
from .cursor import CursorEvent, CursorState
from .geometry import GAME_AREA, Vec2
from .navigation import (
    CREDITS_MUSIC,
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
from .palette import (
    BLACK,
    CLEAR_COLOR,
    GREEN,
    GREEN_500,
    HEADER_TEXT,
    LABEL_TEXT,
    PAUSE_OVERLAY,
    PURCHASE_ROW_BACKGROUND,
    RED,
    SPLASH_BACKGROUND,
    WHITE,
    Color,
    to_rgb255,
    to_rgba255,
)
from .shop import DUST_DATA_LABEL, INVENTORY_TITLE, SHOP_TITLE, InsufficientDataError, UpgradeItem
from .splash import SPLASH_IMAGE, SplashScreen
from .ui import (
    LARGE_BUTTON_SIZE,
    ROOT_ROW_GAP,
    SMALL_BUTTON_SIZE,
    UPGRADE_BUTTON_SIZE,
    Button,
    layout_column,
)
from .world import LEVEL_MUSIC, World

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Bevy Jam 6"
DEFAULT_SIZE = (1280, 720)
FPS = 60
HOVER_SOUND = "button_hover.ogg"
CLICK_SOUND = "button_click.ogg"

_HEADER_SIZE = (600, 50)
_GRID_ROW_HEIGHT = 34
_GRID_GAP = 10
_COLUMN_GAP = 15
_SHOP_WIDTH = 400
_SHOP_ROW_HEIGHT = 50
_SHOP_ROW_GAP = 5
_PADDING = 10


class Game:
    """One running game: state, input handling, stepping and drawing."""

    def __init__(
        self,
        width: int = DEFAULT_SIZE[0],
        height: int = DEFAULT_SIZE[1],
        assets_dir: str | Path = "assets",
        dev: bool = False,
    ) -> None:
        self.width = width
        self.height = height
        self.assets_dir = Path(assets_dir)
        self.dev = dev
        self.debug_ui = False
        self.running = True
        self.world: World | None = None
        self.splash = SplashScreen()
        self.cursor = CursorState()
        self.navigator = Navigator(
            on_screen_change=self._on_screen_change, on_menu_change=self._on_menu_change
        )
        self.audio = AudioPlayer(self.assets_dir, self.navigator.volume)
        self.buttons: list[Button] = []
        self.shop_buttons: list[Button] = []
        self._menu_widgets: list[tuple[object, pygame.Rect]] = []
        self._shop_rows: list[tuple[pygame.Rect, object]] = []
        self._shop_key: tuple[int, ...] | None = None
        self._mouse_pos: tuple[int, int] = (0, 0)
        self._mouse_down = False
        self._dragging = None
        self._hovered = None
        self._last_volume = self.navigator.volume.linear
        self._fonts: dict[int, pygame.font.Font] = {}
        self._splash_image: pygame.Surface | None = None
        self._splash_image_loaded = False

    # -- coordinates -------------------------------------------------------

    def _to_screen(self, point: Vec2) -> tuple[float, float]:
        return point.x + self.width / 2.0, self.height / 2.0 - point.y

    def _to_world(self, pos: tuple[float, float]) -> Vec2:
        return Vec2(pos[0] - self.width / 2.0, self.height / 2.0 - pos[1])

    # -- audio -------------------------------------------------------------

    def _play_music(self, name: str, owner: object) -> None:
        try:
            self.audio.play_music(name, owner)
        except FileNotFoundError as error:
            logger.warning("%s", error)

    def _play_sound(self, name: str) -> None:
        try:
            self.audio.play_sound(name)
        except FileNotFoundError as error:
            logger.warning("%s", error)

    # -- state transitions -------------------------------------------------

    def _on_screen_change(self, old: Screen, new: Screen) -> None:
        if old is Screen.GAMEPLAY:
            self.world = None
            self._dragging = None
            self._hovered = None
            self.shop_buttons = []
            self._shop_rows = []
            self._shop_key = None
            self.audio.stop_music(Screen.GAMEPLAY)
        if new is Screen.GAMEPLAY:
            self.world = World()
            self._play_music(LEVEL_MUSIC, Screen.GAMEPLAY)
        self._build_menu()

    def _on_menu_change(self, old: Menu, new: Menu) -> None:
        if old is Menu.CREDITS:
            self.audio.stop_music(Menu.CREDITS)
        if new is Menu.CREDITS:
            self._play_music(CREDITS_MUSIC, Menu.CREDITS)
        self._build_menu()

    def _activate(self, label: str):
        return lambda: self.navigator.activate(label)

    def _build_menu(self) -> None:
        layout = menu_layout(self.navigator.menu)
        sizes = []
        for item in layout.items:
            if isinstance(item, Header):
                sizes.append(_HEADER_SIZE)
            elif isinstance(item, Grid):
                rows = len(item.rows)
                sizes.append((830, rows * _GRID_ROW_HEIGHT + (rows - 1) * _GRID_GAP))
            elif isinstance(item, VolumeControl):
                sizes.append((830, 40))
            else:
                sizes.append(LARGE_BUTTON_SIZE)
        rects = layout_column(sizes, (self.width // 2, self.height // 2), ROOT_ROW_GAP)
        self._menu_widgets = list(zip(layout.items, rects))
        self.buttons = []
        for item, rect in self._menu_widgets:
            if isinstance(item, ActionButton):
                self.buttons.append(
                    Button(item.label, rect, self._activate(item.label),
                           border_radius=LARGE_BUTTON_SIZE[1] // 2)
                )
            elif isinstance(item, VolumeControl):
                left = rect.centerx + _COLUMN_GAP
                top = rect.centery - SMALL_BUTTON_SIZE[1] // 2
                self.buttons.append(Button("-", (left, top, *SMALL_BUTTON_SIZE), self._activate("-")))
                self.buttons.append(
                    Button("+", (left + 110, top, *SMALL_BUTTON_SIZE), self._activate("+"))
                )

    def _buy(self, item: UpgradeItem) -> None:
        if self.world is None:
            return
        try:
            self.world.purchase(item)
        except InsufficientDataError:
            logger.info("Not enough data to purchase.")

    def _refresh_shop(self) -> None:
        world = self.world
        if world is None:
            return
        key = tuple(world.shop.levels[item] for item in UpgradeItem)
        if key == self._shop_key:
            return
        self._shop_key = key
        left = self.width - _PADDING - _SHOP_WIDTH
        top = _PADDING + 50
        self.shop_buttons = []
        self._shop_rows = []
        for item, offer in world.shop.offers().items():
            row = pygame.Rect(left, top, _SHOP_WIDTH, _SHOP_ROW_HEIGHT)
            button_rect = pygame.Rect(0, 0, *UPGRADE_BUTTON_SIZE)
            button_rect.midright = (row.right - 20, row.centery - 6)
            button = Button(
                "Upgrade", button_rect, lambda item=item: self._buy(item),
                font_size=16, border_radius=5,
            )
            self.shop_buttons.append(button)
            self._shop_rows.append((row, offer))
            top += _SHOP_ROW_HEIGHT + _SHOP_ROW_GAP

    # -- input -------------------------------------------------------------

    def _can_drag(self) -> bool:
        return (
            self.world is not None
            and self.navigator.menu is Menu.NONE
            and not self.navigator.paused
        )

    def _update_hover(self) -> None:
        target = None
        if self._can_drag():
            target = self.world.attacker_at(self._to_world(self._mouse_pos))
        if target is not None and self._hovered is None:
            self.cursor.handle(CursorEvent.OVER)
        elif target is None and self._hovered is not None:
            self.cursor.handle(CursorEvent.OUT)
        self._hovered = target

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self._mouse_pos = event.pos
            if self._dragging is not None:
                dx, dy = event.rel
                self._dragging.drag(dx, dy)
            else:
                self._update_hover()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse_pos = event.pos
            self._mouse_down = True
            if self._can_drag():
                attacker = self.world.attacker_at(self._to_world(event.pos))
                if attacker is not None:
                    self._dragging = attacker
                    self._hovered = attacker
                    self.cursor.handle(CursorEvent.PRESSED)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._mouse_pos = event.pos
            self._mouse_down = False
            if self._dragging is not None:
                self._dragging = None
                self.cursor.handle(CursorEvent.RELEASED)
                self._update_hover()

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_BACKQUOTE:
            self.debug_ui = not self.debug_ui
        elif key == pygame.K_F1:
            if self.dev and self.navigator.screen is Screen.GAMEPLAY and self.world is not None:
                balance = self.world.add_dev_dust()
                logger.info("Added 100 dust. Current balance: %d", balance)
        elif key == pygame.K_ESCAPE:
            if self.navigator.screen is Screen.SPLASH:
                if self.splash.skip(True):
                    self.navigator.set_screen(Screen.TITLE)
            else:
                self.navigator.press_key(Key.ESCAPE)
        elif key == pygame.K_p:
            self.navigator.press_key(Key.P)

    # -- stepping ----------------------------------------------------------

    def _update_buttons(self, buttons: list[Button]) -> None:
        for button in list(buttons):
            clicked = button.update(self._mouse_pos, self._mouse_down)
            if button.just_hovered:
                self._play_sound(HOVER_SOUND)
            if clicked:
                self._play_sound(CLICK_SOUND)

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        if self.navigator.screen is Screen.SPLASH:
            if self.splash.update(dt, True):
                self.navigator.set_screen(Screen.TITLE)

        self._update_buttons(self.buttons)
        if self.world is not None and self.navigator.menu is Menu.NONE:
            self._refresh_shop()
            self._update_buttons(self.shop_buttons)

        if self.world is not None and not self.navigator.paused:
            for sound in self.world.update(dt):
                self._play_sound(sound)

        if self.navigator.volume.linear != self._last_volume:
            self._last_volume = self.navigator.volume.linear
            self.audio.apply_global_volume()

        if self.navigator.exit_requested:
            self.running = False

    # -- drawing -----------------------------------------------------------

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _text(self, surface, text: str, size: int, color: Color, **anchor) -> pygame.Rect:
        rendered = self._font(size).render(text, True, to_rgb255(color))
        rect = rendered.get_rect(**anchor)
        surface.blit(rendered, rect)
        return rect

    def _fill_alpha(self, surface, color: Color, rect: pygame.Rect) -> None:
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.fill(to_rgba255(color))
        surface.blit(layer, rect.topleft)

    def _load_splash_image(self) -> pygame.Surface | None:
        if not self._splash_image_loaded:
            self._splash_image_loaded = True
            try:
                self._splash_image = pygame.image.load(str(self.assets_dir / SPLASH_IMAGE))
            except (FileNotFoundError, pygame.error) as error:
                logger.warning("cannot load splash image: %s", error)
        return self._splash_image

    def _draw_splash(self, surface: pygame.Surface) -> None:
        surface.fill(to_rgb255(SPLASH_BACKGROUND))
        image = self._load_splash_image()
        if image is None:
            return
        width = int(self.width * 0.7)
        height = max(1, int(image.get_height() * width / max(1, image.get_width())))
        scaled = pygame.transform.smoothscale(image.convert_alpha() if pygame.display.get_surface() else image, (width, height))
        scaled.set_alpha(int(self.splash.fade.alpha() * 255))
        surface.blit(scaled, scaled.get_rect(center=(self.width // 2, self.height // 2)))

    def _draw_world(self, surface: pygame.Surface) -> None:
        world = self.world
        size = GAME_AREA.size()
        left, top = self._to_screen(Vec2(GAME_AREA.min.x, GAME_AREA.max.y))
        pygame.draw.rect(surface, to_rgb255(BLACK), (left, top, size.x, size.y), 1)

        for dust in world.dust:
            x, y = self._to_screen(dust.position)
            self._fill_alpha(surface, (*WHITE, dust.alpha()), pygame.Rect(x - 8, y - 8, 16, 16))
            if not dust.health.is_max_health():
                bx, by = x - 10, y - 11 - 2
                pygame.draw.rect(surface, to_rgb255(WHITE), (bx, by, 20, 4))
                pygame.draw.rect(surface, to_rgb255(RED), (bx + 1, by + 1, 18, 2))
                pygame.draw.rect(
                    surface, to_rgb255(GREEN), (bx + 1, by + 1, dust.health.bar_width(20.0), 2)
                )

        for attacker in world.attackers:
            x, y = self._to_screen(attacker.position)
            pygame.draw.rect(surface, to_rgb255(attacker.color()), (x - 8, y - 8, 16, 16))

        for effect in world.effects:
            if effect.line is not None:
                start, end = effect.line
                pygame.draw.line(
                    surface, to_rgb255(WHITE), self._to_screen(start), self._to_screen(end)
                )
            x, y = self._to_screen(effect.position)
            if effect.size is not None:
                pygame.draw.rect(
                    surface, to_rgb255(effect.color),
                    (x - effect.size.x / 2, y - effect.size.y / 2, effect.size.x, effect.size.y),
                )
            if effect.text is not None:
                self._text(surface, effect.text, int(effect.font_size or 12) + 6,
                           effect.color, center=(x, y))

    def _draw_hud(self, surface: pygame.Surface) -> None:
        world = self.world
        rect = self._text(surface, INVENTORY_TITLE, 40, HEADER_TEXT, topleft=(_PADDING, _PADDING))
        self._text(surface, f"{DUST_DATA_LABEL}{world.inventory.dust_data}", 24, LABEL_TEXT,
                   topleft=(_PADDING, rect.bottom + 4))

        bar = pygame.Rect(self.width // 2 - 100, _PADDING, 200, 26)
        pygame.draw.rect(surface, to_rgb255(WHITE), bar)
        inner = bar.inflate(-6, -6)
        fill = min(max(world.power.fill_percent(), 0.0), 100.0)
        pygame.draw.rect(surface, to_rgb255(GREEN_500), (inner.x, inner.y, inner.width * fill / 100.0, inner.height))
        self._text(surface, world.power.label(), 20, BLACK, midleft=(inner.x + 2, inner.centery))

        self._text(surface, SHOP_TITLE, 40, HEADER_TEXT,
                   topleft=(self.width - _PADDING - _SHOP_WIDTH, _PADDING))
        for (row, offer), button in zip(self._shop_rows, self.shop_buttons):
            self._fill_alpha(surface, PURCHASE_ROW_BACKGROUND, row)
            self._text(surface, offer.name, 20, WHITE, topleft=(row.x + 6, row.y + 6))
            self._text(surface, offer.tip(), 16, WHITE, topleft=(row.x + 6, row.y + 28))
            button.draw(surface, self._font(button.font_size))
            self._text(surface, f"Cost: {offer.cost}", 16, WHITE,
                       midtop=(button.rect.centerx, button.rect.bottom + 1))

    def _draw_menu(self, surface: pygame.Surface) -> None:
        cx = self.width // 2
        for item, rect in self._menu_widgets:
            if isinstance(item, Header):
                self._text(surface, item.text, 40, HEADER_TEXT, center=rect.center)
            elif isinstance(item, Grid):
                for index, (left, right) in enumerate(item.rows):
                    y = rect.top + index * (_GRID_ROW_HEIGHT + _GRID_GAP) + _GRID_ROW_HEIGHT // 2
                    self._text(surface, left, 24, LABEL_TEXT, midright=(cx - _COLUMN_GAP, y))
                    self._text(surface, right, 24, LABEL_TEXT, midleft=(cx + _COLUMN_GAP, y))
            elif isinstance(item, VolumeControl):
                self._text(surface, item.label, 24, LABEL_TEXT, midright=(cx - _COLUMN_GAP, rect.centery))
                self._text(surface, self.navigator.volume.label(), 24, LABEL_TEXT,
                           center=(cx + _COLUMN_GAP + 70, rect.centery))
        for button in self.buttons:
            button.draw(surface, self._font(button.font_size))
            if self.debug_ui:
                pygame.draw.rect(surface, to_rgb255(RED), button.rect, 1)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current frame onto ``surface``."""
        if self.navigator.screen is Screen.SPLASH:
            self._draw_splash(surface)
        else:
            surface.fill(to_rgb255(CLEAR_COLOR))
        if self.world is not None:
            self._draw_world(surface)
            self._draw_hud(surface)
        if self.navigator.overlay_visible:
            self._fill_alpha(surface, PAUSE_OVERLAY, surface.get_rect())
        self._draw_menu(surface)

    def run(self) -> None:
        """Open the window and run the main loop until the game exits."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update(clock.tick(FPS) / 1000.0)
                self.draw(surface)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="aircleaner", description="A Lightning Air Cleaner.")
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE[0])
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE[1])
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    parser.add_argument("--dev", action="store_true", help="enable developer shortcuts")
    args = parser.parse_args(argv)
    Game(args.width, args.height, args.assets, args.dev).run()
    return 0