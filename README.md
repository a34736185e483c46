# scuolagame

A small side-scrolling adventure set in a school, built on pygame.

The game opens on a main menu (Gioca, Opzioni, Esci) over a field of drifting
particles. "Gioca" stops the menu music and fades into a loading screen with a
spinning throbber. After a few seconds it fades into the story screen, while a
bell rings twelve times. Pressing Enter there fades into the courtyard. In the
courtyard a green pawn walks and falls under gravity. It collides with the
floor, the central stairs and the two side walls.

"Opzioni" opens the options menu. Its "Fullscreen" entry switches between
fullscreen and a 1280×720 window, and "Indietro" goes back to the main menu.

## Installing

```
pip install .
```

## Playing

```
scuolagame
scuolagame --fullscreen
scuolagame --assets path/to/assets
```

Options:

- `--assets DIR` sets the directory that holds the game assets. The default is `assets`.
- `--fullscreen` starts the game in fullscreen mode.

Controls:

- **Up / Down** move through the menus.
- **Enter** selects a menu entry, or continues from the story screen.
- **F11** toggles fullscreen while a menu is shown.
- **Escape** goes back from the options menu to the main menu. On any other screen it quits.
- **A / D** walk left and right, and **S** moves down.

### Assets

The game looks for its files in the assets directory:

- Images: `mainMenuNoText.png`, `optionsBackground.png`, `TramaInit.png`, `cap1.png`, `cortile.png`, `scale1.png` and `scale2.png`.
- Font: `AFont.ttf`.
- Sounds and music: `musica/Main Menu.wav`, `suoni/pulsante.ogg`, `suoni/campana.ogg`, `suoni/introCapitolo.ogg` and `suoni/night-ambience-normal.mp3`.

A missing asset is logged and the game carries on without it. The menus and
the loading screen fall back to pygame's default font. Sounds are skipped when
no audio device is available.

## Using the pieces

The game is made of small classes that can be used on their own:

```python
from scuolagame.pawn import Pawn
from scuolagame.ingame import InGame, CollisionType

pawn = Pawn(50.0, 200.0, 9.81)
pawn.land_on_ground((1280, 720))   # centre now sits at y = 720 * 0.9 - 50
```

- `scuolagame.pawn.Pawn`: the player. It provides `move`, `apply_gravity`, `land_on_ground`, `set_default_position` and `draw`, plus the `position` and `bounds` properties.
- `scuolagame.particle.Particle`: a drifting menu particle. It provides `update`, `wrap` and `draw`. `wrap` moves a particle that has left the area to the opposite edge.
- `scuolagame.menus.MainMenu` and `scuolagame.menus.OptionsMenu`: the keyboard menus. They provide `move_up`, `move_down`, `layout`, `draw` and the `selected` index.
- `scuolagame.loading.LoadingScreen`: the loading screen with its rotating throbber.
- `scuolagame.ingame.InGame`: the in-game scenes (`InGameState`), the locations (`Location`), fade transitions and sounds. It also holds the collision geometry: `create_colliders`, `update_colliders` and `check_collision`, which returns a `CollisionType`.
- `scuolagame.game.Game`: the state machine (`GameState`) that ties everything together. `scuolagame.game.main` is the command's entry point.

## What it does not do

- The "Audio", "Video" and "Controlli" entries in the options menu do nothing. The volume slider is drawn but cannot be moved.
- The courtyard is the only place the player can reach. The other locations have no behaviour. Most have no artwork either: only the courtyard and the two staircases load a background.
- The player cannot jump. Gravity only acts once the pawn has vertical speed, which it gets from climbing the stairs.

## Running the tests

```
pip install .[test]
pytest
```