"""The game engine: owns every component and runs the main loop."""

from __future__ import annotations

from typing import Any, Optional

from .audio import Audio
from .camera import Camera
from .controls import Input
from .dungeon.builder import Builder
from .dungeon.decorator import Decorator
from .entities import Entities
from .entity import Entity, Team
from .events import Events
from .graphics.graphics import Graphics
from .util.timer import Timer

TIME_STEP_PER_UPDATE = 0.1  # seconds of game time consumed by one update


def _center_camera(engine: Engine, entity: Entity) -> None:
    engine.camera.move_to(entity.position)


def _update_visibility(engine: Engine, entity: Entity) -> None:
    engine.dungeon.update_visibility(entity.position)


class Engine:
    """Input, audio, graphics, the dungeon, its entities and events."""

    def __init__(self, settings: Any) -> None:
        self.input = Input()
        self.audio = Audio()
        self.entities = Entities()
        self.graphics = Graphics(settings.title, settings.screen_width, settings.screen_height)
        self.camera = Camera(self.graphics, settings.tile_size, settings.zoom)
        self.events = Events()
        self.hero: Optional[Entity] = None
        self._running = False

        self.audio.load_sounds(settings.sounds)
        self.audio.play_sound("background", True)

        for sheet in (
            settings.tiles,
            settings.heroes,
            settings.monsters,
            settings.items,
            settings.effects,
        ):
            self.graphics.load_sprite_sheet(sheet)

        builder = Builder(settings.room_placement_attempts)
        layout, rooms = builder.generate(settings.map_width, settings.map_height)
        self.dungeon = Decorator(self.graphics, layout, rooms).create_dungeon()

    def create_hero(self) -> Entity:
        """Place the hero on a random room tile; the camera and fog follow it."""
        position = self.dungeon.random_open_room_tile()
        hero = Entity(self, position, Team.HERO)
        self.hero = hero
        self.entities.add(hero)

        for callback in (_center_camera, _update_visibility):
            callback(self, hero)
            hero.on_move.append(callback)
        return hero

    def create_monster(self) -> Entity:
        """Place a monster on a random room tile."""
        position = self.dungeon.random_open_room_tile()
        monster = Entity(self, position, Team.MONSTER)
        self.entities.add(monster)
        return monster

    def remove_entity(self, entity: Entity) -> None:
        """Take an entity off its tile and out of play."""
        self.dungeon.remove_entity(entity.position)
        entity.set_max_health(0)

    def run(self) -> None:
        """Run the game loop until stopped or the hero dies."""
        if self.hero is None:
            raise RuntimeError("Engine.run(): No hero has been added to the game")
        self._running = True
        timer = Timer()
        accumulated_time = 0.0

        while self._running and self.hero is not None and self.hero.alive:
            # input and rendering produce time; updates consume it in fixed steps
            accumulated_time += timer.elapsed()
            self._handle_input()
            while accumulated_time >= TIME_STEP_PER_UPDATE:
                self._update()
                accumulated_time -= TIME_STEP_PER_UPDATE
            self._render()

    def stop(self) -> None:
        self._running = False

    def _handle_input(self) -> None:
        for event in self.input.poll_events():
            if event == "Quit":
                self.stop()
                break
            if event == "-":
                self.camera.zoom_out()
            elif event == "=":  # also the + key
                self.camera.zoom_in()
            else:
                self.input.record_keypress(event)

    def _update(self) -> None:
        self.camera.update()
        self.dungeon.update()
        self.entities.update()

        # entities act until an event is produced or someone has to wait
        while not len(self.events) and self.entities.take_turn(self):
            pass

        self.events.execute(self)

    def _render(self) -> None:
        self.graphics.clear()
        self.camera.render_dungeon(self.dungeon)
        self.camera.render_entities(self.entities)
        self.camera.render_overlays()
        self.camera.render_fog(self.dungeon)

        if self.hero is not None:
            self.camera.render_health_bar(self.hero.health, self.hero.max_health)
            selected, names = self.hero.inventory_list()
            self.camera.render_items(selected, names)
        self.graphics.redraw()