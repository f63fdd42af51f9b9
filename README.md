# chiprunner

Game logic for a small side-scrolling platformer, written as plain Python
objects that you step frame by frame and inspect. It contains:

- a tile map ("map chips") loaded from CSV;
- a player with running, braking, gravity, jumping, and ceiling, floor and wall
  collision against the map;
- walking enemies;
- a death-particle burst;
- a title scene with a bobbing logo;
- vector and matrix maths, bounding boxes and easing curves;
- light, material and window-geometry data;
- a texture slot manager.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `chiprunner.vecmath` | `Vector2`, `Vector3`, `Vector4`, `Matrix4x4`, `make_affine_matrix`, `make_rotate_x_matrix` / `make_rotate_y_matrix` / `make_rotate_z_matrix`, `transform`, `matrix_multiply`, `lerp`, `degrees_to_radians` |
| `chiprunner.transform` | `WorldTransform` (with `update_matrix`), `ViewProjection` |
| `chiprunner.aabb` | `AABB` and `is_collision` |
| `chiprunner.easing` | `linear`, `ease_in`, `ease_out`, `ease_in_out`, `smooth_step` |
| `chiprunner.material` | `Material`, `ObjectColor` |
| `chiprunner.lights` | `DirectionalLight`, `PointLight`, `SpotLight`, `CircleShadow`, `LightGroup` |
| `chiprunner.window` | `WindowState`, `WindowRect`, `SizeChangeMode`, `SizingEdge`, `fix_aspect` |
| `chiprunner.mapchip` | `MapChipType`, `MapChipField`, `IndexSet`, `Rect` |
| `chiprunner.enemy` | `Enemy` |
| `chiprunner.particles` | `DeathParticles` |
| `chiprunner.input` | `Key`, `Keyboard` (`update`, `push_key`, `trigger_key`) |
| `chiprunner.player` | `Player`, `LRDirection`, `Corner`, `CollisionMapInfo` |
| `chiprunner.title_scene` | `TitleScene` |
| `chiprunner.textures` | `TextureManager`, `Texture`, `UseTable`, `decode_utf8` |

## The tile map

A map is 100 chips wide and 20 chips tall, one unit per chip. Each CSV cell
holds one of these values:

- `0` for blank;
- `1` for a block;
- `2` for a save block;
- `3` for a goal block.

Row 0 of the file is the top row of the level. Unknown or missing cells stay
blank.

```python
from chiprunner.mapchip import MapChipField

field = MapChipField()
field.load_csv("blocks.csv")    # or field.load_csv_text(text)

field.type_at(3, 13)        # MapChipType of the chip at column 3, row 13
field.position_at(3, 13)    # centre of that chip in world space
field.rect_at(3, 13)        # its left/right/bottom/top edges
field.index_set_at(pos)     # the cell holding a world position
```

Indices outside the map read as `MapChipType.BLANK`.

## Collision boxes

```python
from chiprunner.aabb import AABB, is_collision
from chiprunner.vecmath import Vector3

a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
b = AABB(Vector3(0.5, 0.5, 0.5), Vector3(2, 2, 2))
is_collision(a, b)   # True
```

Boxes that only touch at an edge also count as colliding. `Player.aabb()` and
`Enemy.aabb()` give the boxes of the characters.

## Driving a frame

Input comes from a `Keyboard`. Each frame, call `Keyboard.update` with the keys
that are held down, then pass the keyboard to whatever you are updating.

```python
from chiprunner.input import Key, Keyboard
from chiprunner.mapchip import MapChipField
from chiprunner.player import Player
from chiprunner.enemy import Enemy

field = MapChipField()
field.load_csv("blocks.csv")

player = Player(field.position_at(3, 13), field)
enemy = Enemy(field.position_at(15, 18))
keyboard = Keyboard()

keyboard.update({Key.RIGHT})
player.update(keyboard)
enemy.update()
```

The arrow keys run left and right, and `Key.UP` jumps while on the ground.
After an update, the player exposes:

- `is_dead`, set by `on_collision` when an enemy touches it;
- `spawn`, which becomes 1 once a save block has been landed on;
- `hit_goal`, set when it lands on a goal block.

`respawn(position)` brings it back to life at rest. `DeathParticles(position)`
plays an eight-particle ring that fades out over one second; its `finished`
flag turns true when the burst is over.

`TitleScene.update(keyboard)` bobs the title and sets `finished` once
`Key.SPACE` is held.

## Textures

`TextureManager` reads files into numbered slots. A name that is already loaded
returns its existing handle. Names starting with `./` are read as given; all
other names are read under `Resources/`, or under the directory you pass.
`unload` frees a slot for reuse.

## What this package does not do

It draws nothing and opens no window; `WindowState` only tracks geometry. It
has no game scene that ties the player, enemies and particles together into
play and death phases, and no camera that follows the player. It has no sprite
type, no scene switching and no command to run. An application that wants a
playable game has to drive these pieces and render them itself.