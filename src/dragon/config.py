# --- World (all units are world pixels, sprites are SPRITE_SIZE square) ---
SCREEN_WIDTH = 160
SCREEN_HEIGHT = 128
SPRITE_SIZE = 4
RENDER_OFFSET_X = 5          # screen column where the dragon is drawn

# --- Display ---
WINDOW_SCALE = 4             # window px per world px
FPS = 60
TEXT_CELL_PX = 8             # window px per text console cell
TEXT_COLS = SCREEN_WIDTH * WINDOW_SCALE // TEXT_CELL_PX
FONT_NAME = "jetbrainsmono"
FONT_SIZE = 14

# --- Consoles ---
TEXT_CONSOLE = 0
SPRITE_CONSOLE = 1

# --- Physics (per dt, where dt = frame_time_ms / DT_DIVISOR) ---
DT_DIVISOR = 100.0
GRAVITY = 0.4
MAX_FALL_SPEED = 8.0
FLAP_IMPULSE = -4.0
FORWARD_SPEED = 6.0

# --- Player ---
PLAYER_START_X = 5
PLAYER_START_Y = 25

# --- Animation ---
NUM_ANIMATION_FRAMES = 4
DEFAULT_ANIMATION_FRAME = 1
ANIMATION_FRAME_LENGTH = 20.0   # ms per frame

# --- Obstacles ---
MAX_GAP_SIZE = 32
MIN_GAP_SIZE = 2
GAP_MARGIN = SPRITE_SIZE * 4    # gap centre stays this far from top/bottom
BRICK_SPRITE = 4
SEED_DEFAULT = 12345

# --- Sprite sheet ---
SHEET_FRAME_PX = 32
SHEET_FRAMES = 5

# --- Colors (RGB) ---
COLOR_BG = (0, 0, 0)
COLOR_NAVY = (0, 0, 128)
COLOR_FG = (255, 255, 255)
COLOR_WHITE = (255, 255, 255)
# fallback fill per sprite frame when no sheet is loaded (4 dragon frames + brick)
COLOR_FRAMES = (
    (255, 120, 60),
    (255, 160, 80),
    (255, 200, 100),
    (255, 160, 80),
    (150, 90, 60),
)
