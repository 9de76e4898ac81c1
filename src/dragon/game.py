# src/dragon/game.py
import sys, argparse, random
from pathlib import Path
from typing import List, Optional
import pygame
from pygame import K_SPACE, K_ESCAPE, K_p, K_q, K_w, K_a, K_s, K_d
from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_SCALE, FPS, TEXT_CELL_PX, TEXT_COLS,
    FONT_NAME, FONT_SIZE, TEXT_CONSOLE, SEED_DEFAULT,
    SHEET_FRAME_PX, SHEET_FRAMES, COLOR_BG, COLOR_FG, COLOR_FRAMES
)
from src.keys import Key
from .host import Host, apply_effects
from .modes import GameState, TickInput, new_game, transition

DEBUG_TICK_LOGS = False

PYGAME_KEYS = {
    K_SPACE: Key.SPACE,
    K_ESCAPE: Key.ESCAPE,
    K_p: Key.P,
    K_q: Key.Q,
    K_w: Key.W,
    K_a: Key.A,
    K_s: Key.S,
    K_d: Key.D,
}


def load_sprite_sheet(path: Path) -> List[pygame.Surface]:
    """Slice a horizontal strip of SHEET_FRAMES square frames (4 dragon frames, then the brick)."""
    if not path.exists():
        raise FileNotFoundError(f"Sprite sheet not found: {path}")
    sheet = pygame.image.load(str(path))
    frames = []
    for i in range(SHEET_FRAMES):
        rect = pygame.Rect(i * SHEET_FRAME_PX, 0, SHEET_FRAME_PX, SHEET_FRAME_PX)
        frames.append(sheet.subsurface(rect).copy())
    return frames


class PygameHost(Host):
    """
    Two layered consoles drawn into one window:
    - sprite console in world units, scaled by `scale`
    - text console on a TEXT_CELL_PX grid, drawn on top
    """

    def __init__(self, scale: int = WINDOW_SCALE, frames: Optional[List[pygame.Surface]] = None,
                 surface: Optional[pygame.Surface] = None):
        self.scale = scale
        self.size = (SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale)
        self.screen = surface if surface is not None else pygame.Surface(self.size)
        self.text_layer = pygame.Surface(self.size, pygame.SRCALPHA)
        self.sprite_layer = pygame.Surface(self.size, pygame.SRCALPHA)
        self.text_bg = COLOR_BG
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.frames = frames
        self._scaled_cache = {}
        self.frame_time_ms = 0.0
        self.key = None
        self.quitting = False

    # --- Host API ---

    def cls(self, console: int, bg=None):
        if console == TEXT_CONSOLE:
            self.text_bg = bg if bg is not None else COLOR_BG
            self.text_layer.fill((0, 0, 0, 0))
        else:
            self.sprite_layer.fill((0, 0, 0, 0))

    def print_at(self, x: int, y: int, text: str):
        self.text_layer.blit(self.font.render(text, True, COLOR_FG), (x * TEXT_CELL_PX, y * TEXT_CELL_PX))

    def print_centered(self, y: int, text: str):
        col = max(0, (TEXT_COLS - len(text)) // 2)
        self.print_at(col, y, text)

    def add_sprite(self, rect, frame: int, tint):
        x, y, w, h = rect
        dst = pygame.Rect(x * self.scale, y * self.scale, w * self.scale, h * self.scale)
        if self.frames is not None:
            img = self.frames[frame]
            if img.get_size() != dst.size:
                key = (frame, dst.size)
                if key not in self._scaled_cache:
                    self._scaled_cache[key] = pygame.transform.scale(img, dst.size)
                img = self._scaled_cache[key]
            self.sprite_layer.blit(img, dst)
        else:
            pygame.draw.rect(self.sprite_layer, COLOR_FRAMES[frame % len(COLOR_FRAMES)], dst)

    # --- Frame composition ---

    def compose(self) -> pygame.Surface:
        self.screen.fill(self.text_bg)
        self.screen.blit(self.sprite_layer, (0, 0))
        self.screen.blit(self.text_layer, (0, 0))
        return self.screen


class DragonGame:
    """Owns the authoritative GameState and pumps it through the host once per frame."""

    def __init__(self, host: Host, rng: Optional[random.Random] = None):
        self.host = host
        self.state: GameState = new_game(rng)

    def tick(self) -> bool:
        """Run one frame. Returns False once the host was asked to quit."""
        inp = TickInput(frame_time_ms=self.host.frame_time_ms, key=self.host.key)
        self.state, effects = transition(self.state, inp)
        apply_effects(self.host, effects)
        return not self.host.quitting


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Obstacle seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--sprites", type=str, default=None,
                   help="Sprite sheet PNG (5 frames of 32x32 in a row). Omit to draw plain boxes.")
    p.add_argument("--scale", type=int, default=WINDOW_SCALE, help="Window pixels per world pixel")
    p.add_argument("--fps", type=int, default=FPS)
    return p.parse_args()


def run():
    args = parse_args()

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = random.randrange(0, 2**32 - 1)
    else:
        launch_seed = args.seed

    _print_timer = 0.0 if DEBUG_TICK_LOGS else None

    pygame.init()
    pygame.display.set_caption("Flappy Dragon")
    window = pygame.display.set_mode((SCREEN_WIDTH * args.scale, SCREEN_HEIGHT * args.scale))
    clock = pygame.time.Clock()

    frames = load_sprite_sheet(Path(args.sprites)) if args.sprites else None
    host = PygameHost(scale=args.scale, frames=frames, surface=window)
    game = DragonGame(host, random.Random(launch_seed))
    print(f"Flappy Dragon  seed={launch_seed}")

    running = True
    while running:
        host.frame_time_ms = float(clock.tick(args.fps))
        host.key = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                host.quit()
            if event.type == pygame.KEYDOWN and event.key in PYGAME_KEYS:
                host.key = PYGAME_KEYS[event.key]

        if not host.quitting:
            running = game.tick()
        else:
            running = False

        if _print_timer is not None:
            _print_timer -= host.frame_time_ms / 1000.0
            if _print_timer <= 0.0:
                _print_timer = 0.5  # print twice per second
                st = game.state
                print(f"mode={st.mode.value} x={st.player.x} y={st.player.y} v={st.player.velocity:.2f} "
                      f"gap={st.obstacle.gap_y}±{st.obstacle.half_size} obs_x={st.obstacle.x} score={st.score}")

        host.compose()
        pygame.display.flip()

    print(f"Final score: {game.state.score}")
    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    run()
