# kokiri

A small 2D game engine built on pygame. A game is made of scenes, a scene
holds entities, and an entity carries components such as sprites, tilemaps,
soundtracks and cameras. Assets are loaded once into a shared resource pool
and retrieved by name.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Quick start

```python
from kokiri.game import Game, Resource
from kokiri.scene import Scene
from kokiri.entity import Entity, EntityProperties
from kokiri.component import ComponentType
from kokiri.functions import FunctionType
from kokiri.event import MouseButton

with Game("A Game", 1024, 600) as game:
    level = Scene(game.window, "level")
    game.add_scene(level)
    game.set_active_scene("level")

    game.load(Resource("penguin", "penguin.png", ComponentType.SPRITE))
    game.load(Resource("bgm", "stageState.ogg", ComponentType.SOUNDTRACK))

    player = Entity(EntityProperties("player"))
    player.add_component(game.retrieve("penguin"))
    player.add_component(game.retrieve("bgm"))
    player.play("")

    level.add_entity(player)

    def on_event():
        if game.events.is_mouse_click(MouseButton.LEFT):
            player.set_position(game.events.mouse_position())

    level.bind(FunctionType.EVENT, on_event)

    game.loop()
```

Each frame the loop clears the window, renders the active scene's entities,
gathers input, runs the scene's bound event callback and updates the
entities. It aims for 60 frames per second. While it runs, `Q` or `Esc`
quits and `F1` toggles debug output. Leaving the `with` block (or calling
`Game.close()`) frees the loaded resources and closes the window and mixer.

`Game.retrieve` returns `None`, after logging an error, when no resource has
that name. `Game.load` returns `False` when the name is already taken.

## Modules

- `kokiri.game`: `Game` (loop, scenes, `load`, `retrieve`, `close`), `Resource` and `GameProperties`
- `kokiri.scene`: `Scene`, holding entities by unique name and callbacks bound by `FunctionType`
- `kokiri.entity`: `Entity` and `EntityProperties`
- `kokiri.component`: the `Component` base class and `ComponentType`
- `kokiri.resources`: the named `Resources` pool
- `kokiri.sprite`: `Sprite`, an image drawn at an entity's position
- `kokiri.tileset`: `Tileset`, an image cut into equally sized tiles
- `kokiri.tilemap`: `Tilemap` and `parse_tilemap`, layers of tile numbers read from comma separated text
- `kokiri.camera`: `Camera` and the `CameraFollower` component
- `kokiri.sound`: `Sound` mixer lifetime and `Track` playback
- `kokiri.event`: per-frame keyboard and mouse state, with `Key` and `MouseButton`
- `kokiri.window`: `Window` and `WindowProperties`
- `kokiri.renderer`: `Renderer2D`
- `kokiri.application`: `Application`, `ApplicationWindow` and `RenderType`
- `kokiri.vector`: `Vector2` and `Vector3`
- `kokiri.timer`: `Timer` with `TimeUnit`
- `kokiri.utils`: `extension`, `split`, `uuid` and `hash_string`
- `kokiri.log`: coloured `info`, `warn` and `error` output

## Demo

```
kokiri-demo [scene|window] [--assets DIR]
```

`scene` (the default) builds a level with a background, background music and
a player that moves to where the left mouse button is clicked. It expects
`ocean.jpg`, `penguin.png`, `stageState.ogg` and `boom.wav` in the directory
given by `--assets` (the current directory by default).

`window` opens a bare 800×600 window: `Esc` or `Q` quits, `F` toggles
fullscreen and `D` toggles logging of other key events.

## Limitations

- There is no OpenGL drawing. `RenderType.OPENGL` only opens an OpenGL
  window; no renderer is attached to it and nothing is drawn.
- `Camera` keeps a position and speed but does not move or follow its
  entity, and `CameraFollower` draws nothing.
- `Entity.play` plays the first soundtrack attached; the name it is given is
  not used.