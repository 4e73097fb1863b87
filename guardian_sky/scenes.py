"""Scene types, the end screens and the director that switches between scenes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Protocol

from guardian_sky.textures import TextureManager


class SceneType(enum.Enum):
    TITLE = enum.auto()
    GAME_PLAY = enum.auto()
    GAME_OVER = enum.auto()
    CLEAR_GAME = enum.auto()


class Scene(Protocol):
    is_scene_end: bool

    def update(self, space_triggered: bool) -> None: ...

    def next_scene(self) -> SceneType: ...


@dataclass
class _EndScreen:
    """A still screen whose texture is loaded when it is created."""

    TEXTURE: ClassVar[str] = ""

    textures: TextureManager | None = None
    is_scene_end: bool = False
    texture_handle: int | None = None

    def __post_init__(self) -> None:
        if self.textures is not None:
            self.texture_handle = self.textures.load(self.TEXTURE)


@dataclass
class ClearScene(_EndScreen):
    """Shown after the game is cleared."""

    TEXTURE: ClassVar[str] = "clear.png"

    def update(self, space_triggered: bool) -> None:
        """End the scene on the frame space is triggered."""
        self.is_scene_end = bool(space_triggered)

    def next_scene(self) -> SceneType:
        return SceneType.TITLE


@dataclass
class GameOverScene(_EndScreen):
    """Shown after the player loses."""

    TEXTURE: ClassVar[str] = "gameOver.png"

    def update(self, space_triggered: bool) -> None:
        """End the scene on the frame space is triggered."""
        self.is_scene_end = bool(space_triggered)

    def next_scene(self) -> SceneType:
        return SceneType.TITLE


class SceneDirector:
    """Runs the current scene each frame and moves to the next one when it ends."""

    def __init__(
        self,
        title: Scene,
        game_play: Scene,
        game_over: Scene | None = None,
        clear: Scene | None = None,
        start: SceneType = SceneType.TITLE,
    ) -> None:
        self.scenes: dict[SceneType, Scene] = {
            SceneType.TITLE: title,
            SceneType.GAME_PLAY: game_play,
            SceneType.GAME_OVER: game_over if game_over is not None else GameOverScene(),
            SceneType.CLEAR_GAME: clear if clear is not None else ClearScene(),
        }
        self.current = start

    @property
    def scene(self) -> Scene:
        return self.scenes[self.current]

    def update(self, space_triggered: bool) -> SceneType:
        """Advance one frame and return the scene type to draw."""
        scene = self.scene
        if self.current is SceneType.GAME_PLAY:
            scene.update(space_triggered)
            self.current = scene.next_scene()
            return self.current
        if self.current in (SceneType.GAME_OVER, SceneType.CLEAR_GAME):
            reset = getattr(self.scenes[SceneType.GAME_PLAY], "reset", None)
            if callable(reset):
                reset()
        scene.update(space_triggered)
        if scene.is_scene_end:
            self.current = scene.next_scene()
        return self.current