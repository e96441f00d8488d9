# --- Display ---
WIDTH = 400
HEIGHT = 600
FPS = 60
TITLE = "Block Jump"
MAX_TICKS_PER_FRAME = 2     # clamp stalls (fixed-step catch-up)

# --- World / Physics (per tick, never scaled by dt) ---
GRAVITY = 0.5
JUMP_FORCE = -12.0
MOVE_SPEED = 5.0

# --- Player ---
PLAYER_W = 40
PLAYER_H = 60
PLAYER_START_X = WIDTH / 2
PLAYER_START_Y = HEIGHT - 50

# --- Level generation ---
PLATFORM_W = 70
PLATFORM_H = 20
PLATFORM_SPACING = 100      # vertical gap between consecutive platforms
INITIAL_PLATFORMS = 5

# --- Score ---
SCORE_DIVISOR = 10          # world units per point

# --- HUD ---
FONT_NAME = "ubuntumono"
FONT_SIZE = 24
HUD_POS = (10, 10)

# --- Colors (RGB) ---
COLOR_BG = (175, 175, 175)
COLOR_PLAYER = (0, 0, 255)
COLOR_PLAT = (0, 255, 0)
COLOR_FG = (0, 0, 0)
COLOR_DIM = (70, 70, 70)
