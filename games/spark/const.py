# Palette (targets pick one at random, particles inherit it)
TARGET_COLORS = ("#00ffff", "#ff00ff", "#ffff00", "#00ff00")

# Session
INITIAL_LIVES = 3

# Targets
TARGET_RADIUS = 30                 # px, also the hit radius
TARGET_LIFETIME_MS = 2000          # lifetime at speed factor 1
MIN_TARGET_LIFETIME_MS = 1000      # floor as speed grows
MIN_RENDER_SCALE = 0.7             # radius fraction drawn at expiry
GLOW_FREQUENCY = 0.01              # rad per ms
RING_OFFSET = 5                    # px outside the drawn radius
RING_WIDTH = 3
RING_COLOR = (255, 255, 255)

# Spawning / difficulty
INITIAL_SPAWN_INTERVAL_MS = 1200
MIN_SPAWN_INTERVAL_MS = 800
MAX_SPAWN_INTERVAL_MS = 1500
SPEED_INCREASE_RATE = 0.02         # added to the speed factor per spawn
SPAWN_MARGIN = 60                  # keep targets off the edges
HUD_HEIGHT = 80                    # band at the top reserved for the HUD

# Scoring
BASE_SCORE = 100
MAX_REACTION_BONUS = 100

# Explosions
EXPLOSION_PARTICLES = 15
PARTICLE_MAX_SPEED = 4.0           # px per frame, per axis
PARTICLE_LIFE_DECAY = 0.02         # per frame
PARTICLE_SIZE_DECAY = 0.98         # per frame
PARTICLE_DRAG = 0.98               # velocity multiplier per frame
PARTICLE_MIN_SIZE = 2.0
PARTICLE_MAX_SIZE = 6.0

# Persistence
HIGH_SCORE_KEY = "split_second_spark.high_score"

# UX
HIT_FLASH_MS = 200
GAME_OVER_SCREEN_DELAY_MS = 1000
HUD_COLOR = (230, 230, 230)
HUD_FONT_SIZE = 32
TITLE_FONT_SIZE = 72
BODY_FONT_SIZE = 28
HEART_COLOR = (255, 70, 110)
HEART_RADIUS = 9
HIT_CIRCLE_COLOR = (255, 80, 80)
