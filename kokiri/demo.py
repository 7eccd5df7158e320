"""Demonstration programs: a small scene with a movable player, and a bare window."""

from __future__ import annotations

import argparse
import os

import pygame

from kokiri import log
from kokiri.component import ComponentType
from kokiri.entity import Entity, EntityProperties
from kokiri.event import MouseButton
from kokiri.functions import FunctionType
from kokiri.game import Game, Resource
from kokiri.scene import Scene
from kokiri.vector import Vector2
from kokiri.window import Window, WindowProperties


def build_scene_demo(game: Game) -> Scene | None:
    """Set up the demo scenes on game and return the level scene.

    Returns None, after logging, when a needed resource is missing.
    """
    level = Scene(game.window, "level")
    menu = Scene(game.window, "menu")
    over = Scene(game.window, "over")

    game.add_scene(menu)
    game.add_scene(level)
    game.add_scene(over)
    game.set_active_scene("level")

    game.load(Resource("bgm", "stageState.ogg", ComponentType.SOUNDTRACK))
    game.load(Resource("shot", "boom.wav", ComponentType.SOUNDTRACK))
    game.load(Resource("background", "ocean.jpg", ComponentType.SPRITE))
    game.load(Resource("penguin", "penguin.png", ComponentType.SPRITE))

    world = Entity(EntityProperties("background", size=Vector2(1024, 600)))

    background = game.retrieve("background")
    music = game.retrieve("bgm")
    penguin = game.retrieve("penguin")
    if background is None or music is None or penguin is None:
        log.error("resource is null")
        return None

    world.add_component(background)
    world.add_component(music)
    world.play("")

    player = Entity(
        EntityProperties("player", size=Vector2(penguin.width, penguin.height))  # type: ignore[attr-defined]
    )
    player.add_component(penguin)

    # The player is drawn first, the world after it.
    level.add_entity(player)
    level.add_entity(world)

    level.bind(FunctionType.RENDER, lambda: None)

    def on_event() -> None:
        events = game.events
        if events.is_mouse_click(MouseButton.LEFT):
            player.set_position(events.mouse_position())

    level.bind(FunctionType.EVENT, on_event)
    return level


def _run_window_demo() -> int:
    try:
        window = Window(
            WindowProperties(800, 600, flags=pygame.SHOWN, title="Kokiri Engine")
        )
    except RuntimeError as exc:
        log.error(exc)
        return 1

    clock = pygame.time.Clock()
    running = True
    debug = False
    with window:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_d:
                        debug = not debug
                    elif event.key == pygame.K_f:
                        try:
                            pygame.display.toggle_fullscreen()
                        except pygame.error as exc:
                            log.error("failed to toggle fullscreen, reason ", exc)
                    elif debug:
                        log.info("event: ", event.type)
            pygame.display.flip()
            clock.tick(60)
    pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run a demo and return the exit status."""
    parser = argparse.ArgumentParser(prog="kokiri", description="Run a demo.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("scene", "window"),
        default="scene",
        help="which demo to run",
    )
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding the scene demo's images and sounds",
    )
    args = parser.parse_args(argv)

    if args.demo == "window":
        return _run_window_demo()

    try:
        os.chdir(args.assets)
    except OSError as exc:
        log.error("cannot use asset directory ", args.assets, ", reason ", exc)
        return 1

    try:
        with Game("A Game", 1024, 600) as game:
            if build_scene_demo(game) is None:
                return 1
            game.loop()
    except RuntimeError as exc:
        log.error(exc)
        return 1
    return 0