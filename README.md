# aircleaner

*A Lightning Air Cleaner* is a small arcade game. Dust falls through the game area,
and lightning attackers clear it. Each attacker charges from a shared power pool
and then strikes the nearest dust particle within range. Energy that is left over
chains on to the next particle. Every particle you destroy adds one unit of dust
data, and you spend that data in the Research Lab on upgrades:

- **Attack Amount**: the most energy one strike can release
- **New Attacker**: adds another attacker at the centre of the field
- **Charge Power**: how much power comes back each second
- **Dust Generation**: how many dust particles fall each second
- **Power Max**: the size of the power pool

Drag attackers with the mouse to place them where the dust falls. An attacker
outside the game area turns black and does not strike.

## Installing

```
pip install .
```

The game needs `pygame`. To install the test dependencies as well:

```
pip install ".[test]"
```

## Playing

```
aircleaner
```

Options:

- `--width`, `--height`: window size in pixels (default 1280 × 720)
- `--assets DIR`: the directory that holds the game's assets (default `assets`)
- `--dev`: turn on developer shortcuts

Controls:

- **Mouse**: press menu buttons, buy upgrades, drag attackers
- **P** or **Esc**: pause during gameplay; **P** closes any open menu again
- **Esc**: resume from the pause menu, go back out of the settings and credits menus, or skip the splash screen
- **`**: outline menu buttons, for checking the layout

The master volume is set in the Settings menu. It goes from 0% to 300% in steps of 10%.

With `--dev`, **F1** adds 100 dust data during gameplay.

### Assets

The package does not ship any images or sounds. The game looks for them under the
assets directory:

- `images/splash.png`: the splash screen image
- `audio/music/`: the gameplay and credits music
- `audio/sound_effects/`: `button_hover.ogg`, `button_click.ogg` and `step1.ogg` to `step4.ogg`

If a file is missing, the game logs a warning and carries on without it. Progress
is not saved. Every time you start playing, you begin a fresh session.

## Using the pieces

The game logic runs without a window, so you can drive it directly:

```python
from aircleaner.shop import InsufficientDataError, UpgradeItem
from aircleaner.world import World

world = World(seed=1)
for _ in range(600):
    sounds = world.update(1 / 60)   # names of the sound effects triggered
print(world.inventory.dust_data)

for item, offer in world.shop.offers().items():
    print(item.name, offer.name, offer.tip(), offer.cost)

world.add_dev_dust()                 # +100 dust data
try:
    world.purchase(UpgradeItem.ATTACK_UPGRADE)
except InsufficientDataError as error:
    print(error.cost, error.balance)
print(world.player_stats.attack_energy)
```

Other modules:

- `aircleaner.upgrades`: the `ExpCosts`, `AdditiveEffect` and `MultiplicativeEffect` progressions, plus `Upgrade.offer(level)`
- `aircleaner.navigation`: `Navigator`, which handles the screen, menu and pause transitions, and `menu_layout(menu)`
- `aircleaner.power`, `aircleaner.health`, `aircleaner.entities`: the power pool, hit points, dust, spawners and attackers
- `aircleaner.app`: `Game`, the pygame window and main loop, and `main`, the command above