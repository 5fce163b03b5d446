"""The windowed application: resource loading, input handling and the main loop."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from pathlib import Path

import pygame

from .game import Game, SoundEvent
from .geometry import Bounds
from .imageset import ImageSet, ImageSetError, parse_config
from .levels import LevelFormatError, load_levels
from .menus import GameOverMenu, WelcomeMenu
from .numeric_display import NumericDisplay

FRAME_RATE = 30
LEVEL_FILE = "levels_config.txt"
IMAGE_LIST = Path("bmpImages") / "list_config_files.txt"
AUDIO_LIST = Path("AudioClips") / "list_audio_files.txt"
SCREENSHOT = "screenshot.jpg"
WINDOW_TITLE = "Asteroids"
WHEEL_STEP = 10.0
HELP_FONT_SIZE = 15
BACKGROUND = (0, 0, 0)


class Mode(Enum):
    """Which screen is showing."""

    WELCOME = "w"
    GAME = "g"
    OVER = "e"


def _read_names(path: Path, count: int) -> list[str]:
    lines = path.read_text().splitlines()
    names = [line.strip() for line in lines[:count]]
    if len(names) < count or not all(names):
        raise ValueError(f"{path} must name {count} files, one per line")
    return names


def _mixer_ready() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    return True


class Application:
    """Loads the game's resources from ``base_dir`` and runs its screens."""

    def __init__(self, base_dir: str | Path = ".") -> None:
        self.base_dir = Path(base_dir)
        self.bounds = Bounds(0, 0, 800, 600)

        settings, levels = load_levels(self.base_dir / LEVEL_FILE)
        ship_images, bad_images, rock_images, shot_images, digit_images = self._load_images()
        self._sounds, self._welcome_loop, self._over_loop = self._load_sounds()

        try:
            self.game = Game(
                settings,
                levels,
                ship_images,
                bad_images,
                rock_images,
                shot_images,
                self.bounds,
            )
        except ValueError as exc:
            raise LevelFormatError(str(exc)) from exc
        self.settings = settings
        self.ship_images = ship_images
        self.shot_images = shot_images
        self.score_display = NumericDisplay(digit_images, 0, 650.0, 20.0, 6, 10, 2.0, True)
        self.welcome = WelcomeMenu(rock_images, self.bounds)
        self.game_over = GameOverMenu(
            bad_images, ship_images, self.bounds, self.game.ship, settings.bad_shot_speed
        )

        self.mode = Mode.WELCOME
        self.mouse = (0, 0)
        self.paused = False
        self.step = False
        self.snapshot = False
        self.running = True
        self.advance = False
        self._fired = False
        self._help_font: pygame.font.Font | None = None
        self.surface = pygame.Surface((self.bounds.width(), self.bounds.height()))

    # -- resources -------------------------------------------------------

    def _resolve(self, name: str) -> Path:
        path = Path(name)
        return path if path.is_absolute() else self.base_dir / path

    def _load_image_set(self, config_path: Path) -> ImageSet:
        try:
            text = config_path.read_text()
        except OSError as exc:
            raise ImageSetError(f"cannot read {config_path}: {exc}") from exc
        image_name, columns, cell_width, cell_height, sets = parse_config(text)
        image_path = self._resolve(image_name)
        if not image_path.exists():
            candidate = config_path.parent / image_name
            if candidate.exists():
                image_path = candidate
        try:
            image = pygame.image.load(str(image_path))
        except (pygame.error, OSError) as exc:
            raise ImageSetError(f"cannot load image {image_path}: {exc}") from exc
        return ImageSet(image, columns, cell_width, cell_height, sets)

    def _load_images(self) -> list[ImageSet]:
        list_path = self.base_dir / IMAGE_LIST
        try:
            names = _read_names(list_path, 5)
        except (OSError, ValueError) as exc:
            raise ImageSetError(f"cannot read image list {list_path}: {exc}") from exc
        return [self._load_image_set(self._resolve(name)) for name in names]

    def _load_sounds(self):
        names = _read_names(self.base_dir / AUDIO_LIST, 5)
        paths = [self._resolve(name) for name in names]
        missing = [str(path) for path in paths if not path.is_file()]
        if missing:
            raise FileNotFoundError(f"missing sound files: {', '.join(missing)}")
        if not _mixer_ready():
            return {}, None, None
        fire, enemy_fire, explosion, welcome, over = (
            pygame.mixer.Sound(str(path)) for path in paths
        )
        effects = {
            SoundEvent.PLAYER_FIRE: fire,
            SoundEvent.ENEMY_FIRE: enemy_fire,
            SoundEvent.EXPLOSION: explosion,
        }
        return effects, welcome, over

    # -- sound -----------------------------------------------------------

    @staticmethod
    def _start_loop(sound) -> None:
        if sound is not None:
            sound.play(loops=-1)

    @staticmethod
    def _stop(sound) -> None:
        if sound is not None:
            sound.stop()

    def _play_pending(self) -> None:
        for event in self.game.sounds:
            sound = self._sounds.get(event)
            if sound is not None:
                sound.play()
        self.game.sounds.clear()

    # -- input -----------------------------------------------------------

    @property
    def mouse_control(self) -> bool:
        """Whether the ship is steered with the mouse rather than the keyboard."""
        return self.game.mouse_control

    def _start_game(self, mouse_control: bool) -> None:
        self.game.mouse_control = mouse_control
        self.game.new_game()
        self._fired = False
        self.mode = Mode.GAME
        self._stop(self._welcome_loop)

    def _left_click(self) -> None:
        x, y = self.mouse
        if self.mode is Mode.GAME:
            if self.mouse_control:
                self.game.ship.thrusting = True
        elif self.mode is Mode.WELCOME:
            on_mouse = self.welcome.mouse_button.hit(x, y)
            if on_mouse or self.welcome.keyboard_button.hit(x, y):
                self._start_game(on_mouse)
        else:
            if self.game_over.replay_button.hit(x, y):
                self._stop(self._over_loop)
                self._start_loop(self._welcome_loop)
                for shot in self.game.bad_shots:
                    shot.in_air = False
                self.game_over.bad_ship.in_play = False
                self.mode = Mode.WELCOME
            elif self.game_over.quit_button.hit(x, y):
                self._stop(self._over_loop)
                self.running = False

    def _key_down(self, key: int) -> None:
        if key == pygame.K_p:
            self.paused = not self.paused
        elif key == pygame.K_s:
            self.step = True
        elif key == pygame.K_r:
            self.game.start_level(self.game.level_num)
        elif key == pygame.K_u:
            self.snapshot = True
        elif key == pygame.K_ESCAPE:
            self.running = False

        ship = self.game.ship
        if self.mode is not Mode.GAME or self.mouse_control or not ship.in_play or ship.killed:
            return
        if key == pygame.K_LEFT:
            self.game.rotate = -1
        elif key == pygame.K_RIGHT:
            self.game.rotate = 1
        elif key == pygame.K_UP:
            ship.thrusting = True
        elif key == pygame.K_DOWN:
            self.game.hyperjump()
        elif key == pygame.K_SPACE and not self._fired:
            self.game.fire_player_shot()
            self._fired = True

    def _key_up(self, key: int) -> None:
        if self.mode is not Mode.GAME or self.mouse_control:
            return
        if key in (pygame.K_LEFT, pygame.K_RIGHT):
            self.game.rotate = 0
        elif key == pygame.K_UP:
            self.game.ship.thrusting = False
        elif key == pygame.K_SPACE:
            self._fired = False

    def handle_event(self, event) -> None:
        """React to one pygame event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.running = False
        elif kind == pygame.MOUSEMOTION:
            self.mouse = tuple(event.pos)
        elif kind == pygame.MOUSEBUTTONDOWN:
            if hasattr(event, "pos"):
                self.mouse = tuple(event.pos)
            if event.button == 1:
                self._left_click()
            elif event.button == 3:
                if self.mode is Mode.GAME and self.mouse_control:
                    self.game.fire_player_shot()
            elif event.button == 2:
                if self.mouse_control:
                    self.game.hyperjump()
        elif kind == pygame.MOUSEBUTTONUP:
            if event.button == 1 and self.mouse_control:
                self.game.ship.thrusting = False
        elif kind == pygame.MOUSEWHEEL:
            if self.mouse_control:
                step = WHEEL_STEP if event.y > 0 else -WHEEL_STEP
                self.game.ship.rotation += step
        elif kind == pygame.KEYDOWN:
            self._key_down(event.key)
        elif kind == pygame.KEYUP:
            self._key_up(event.key)

    # -- frame -----------------------------------------------------------

    def tick(self) -> bool:
        """Run one frame of logic unless paused; returns whether it ran."""
        if self.paused and not self.step:
            self.advance = False
            return False
        self.step = False
        if self.mode is Mode.GAME:
            if not self.game.update():
                self.mode = Mode.OVER
                self._start_loop(self._over_loop)
        elif self.mode is Mode.WELCOME:
            self.welcome.update(*self.mouse)
        elif self.game_over.update(*self.mouse, self.game.bad_shots):
            self.game.sounds.append(SoundEvent.ENEMY_FIRE)
        self._play_pending()
        self.advance = True
        return True

    def _font(self) -> pygame.font.Font:
        if self._help_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._help_font = pygame.font.Font(None, HELP_FONT_SIZE)
        return self._help_font

    def render(self) -> None:
        """Draw the current screen onto ``surface``."""
        surface = self.surface
        surface.fill(BACKGROUND)
        if self.mode is Mode.GAME:
            self.game.draw(surface, self.advance)
            self.score_display.value = self.game.score
            self.score_display.draw(surface)
        elif self.mode is Mode.WELCOME:
            self.welcome.draw(surface, self._font(), self.advance)
        else:
            self.game_over.draw(
                surface, self._font(), self.game.bad_shots, self.shot_images, self.advance
            )
        if self.snapshot:
            pygame.image.save(surface, str(self.base_dir / SCREENSHOT))
            self.snapshot = False

    def run(self) -> None:
        """Open the window and play until the player quits."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((self.bounds.width(), self.bounds.height()))
            pygame.display.set_caption(WINDOW_TITLE)
            self._help_font = None
            if self.mode is Mode.WELCOME:
                self._start_loop(self._welcome_loop)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.tick()
                self.render()
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv=None) -> int:
    """Start the game; returns a non-zero code if resources fail to load."""
    parser = argparse.ArgumentParser(prog="spacerocks", description="Arcade asteroid shooter.")
    parser.add_argument(
        "base_dir",
        nargs="?",
        default=".",
        help="directory holding the level file, images and sounds",
    )
    args = parser.parse_args(argv)
    try:
        app = Application(args.base_dir)
    except LevelFormatError as exc:
        print(f"spacerocks: {exc}", file=sys.stderr)
        return 1
    except ImageSetError as exc:
        print(f"spacerocks: {exc}", file=sys.stderr)
        return 2
    except (OSError, ValueError, pygame.error) as exc:
        print(f"spacerocks: {exc}", file=sys.stderr)
        return 3
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())