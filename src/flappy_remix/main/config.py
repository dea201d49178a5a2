# config.py
# =========================
# Global game configuration
# =========================

# -------- World --------
WORLD_WIDTH = 360
WORLD_HEIGHT = 640
GROUND_H = 92

# -------- Bird --------
BIRD_X = 110
BIRD_R = 14
HITBOX_PAD = 3          # forgiveness: larger = more forgiving
MIN_COLLISION_R = 6
GRAVITY = 1600.0
JUMP_V = -460.0
MAX_FALL = 720.0
MAX_RISE = -1000.0
TILT_UP = -0.35
TILT_DOWN = 0.55
TILT_SMOOTHING = 0.12
START_Y = 260.0

# -------- Pipes --------
PIPE_GAP = 165.0
PIPE_W = 62.0
MIN_TOP = 70.0
MAX_TOP = 380.0
SPAWN_EVERY = 1.25      # seconds
PIPE_SPEED = 210.0      # px/s
FIRST_PIPE_OFFSET = 80.0
SPAWN_OFFSET = 30.0
CULL_MARGIN = 20.0
PERFECT_DIST = 18.0

# -------- Difficulty --------
# name -> (gap multiplier, speed multiplier, ramp per survived second)
DIFFICULTY = {
    "normal": (1.0, 1.0, 0.010),
    "soft": (1.08, 0.95, 0.007),
    "hard": (0.92, 1.06, 0.013),
}
DEFAULT_DIFFICULTY = "normal"

# -------- Coins --------
COINS_BASE_PER_RUN = 0
COINS_PER_SCORE = 1
COINS_PERFECT_BONUS = 1

# -------- Patterns / themes --------
PATTERNS = ("Classic", "Wave", "Stairs")
THEMES = ("Day", "Sunset", "Night", "Rain")

WAVE_AMPLITUDE = 70.0
WAVE_FREQUENCY = 0.9
STAIRS_STEP_RATE = 0.8
STAIRS_STEPS = 6
STAIRS_STEP_H = 28.0

# -------- Loop --------
MAX_DT = 0.05           # stability ceiling
NOMINAL_DT = 0.016
HOLD_TERMINAL_V = 120.0

# -------- Feedback (ms) --------
VIBRATE_FLAP_MS = 12
VIBRATE_PASS_MS = 10
VIBRATE_PERFECT_MS = 18
VIBRATE_HIT_MS = 35

# -------- Storage --------
STORAGE_FILE = "flappy_remix_v1.json"
