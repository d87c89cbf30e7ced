"""Gameplay and tuning constants.

Centralizes numeric tuning values so the simulation, the spawn director and
the tests agree on a single set of numbers. ``GameConfig`` mirrors every
value here as an overridable field.
"""

# World / canvas
WORLD_WIDTH = 400
WORLD_HEIGHT = 800
FRAME_MS = 1000 / 60  # simulated time advanced per step

# Player
PLAYER_WIDTH = 44
PLAYER_HEIGHT = 56
PLAYER_SPEED = 6  # lateral pixels per step
PLAYER_VERTICAL_DIVISOR = 1.5  # vertical speed = PLAYER_SPEED / this
PLAYER_EDGE_INSET = 30  # left/right/top inset of the playable rectangle
PLAYER_BOTTOM_INSET = 50
PLAYER_START_OFFSET_X = -20  # from horizontal centre
PLAYER_START_OFFSET_Y = 120  # from bottom edge
NEXT_LEVEL_OFFSET_X = 0  # player placement after a level advance
NEXT_LEVEL_OFFSET_Y = 100
PLAYER_COLOR = "#94a3b8"

# Banking
BANK_LIMIT = 0.5  # radians
BANK_STEP = 0.08  # lean applied per step while a lateral command is held
BANK_DECAY = 0.06  # return-to-level per step
BANK_DEADZONE = 0.02  # below this the angle snaps to zero

# Scroll
SCROLL_BASE_SPEED = 3.0
SCROLL_LEVEL_INCREMENT = 0.5
SCROLL_FORWARD_FACTOR = 1.5
SCROLL_REVERSE_FACTOR = 0.5
LEVEL_DISTANCE = 4000

# Economy
MAX_FUEL = 300.0
FUEL_DRAIN_PER_STEP = 0.12
FUEL_PICKUP_AMOUNT = 40.0
FUEL_PICKUP_SCORE = 50
ENEMY_KILL_SCORE = 100
FUEL_DESTROY_PENALTY = 50
START_LIVES = 3

# Spawning
SPAWN_INTERVAL_BASE = 120
SPAWN_INTERVAL_LEVEL_STEP = 10
SPAWN_INTERVAL_MIN = 60
ENEMY_SPAWN_CHANCE = 0.7
FUEL_SPAWN_CHANCE = 0.25
ENEMY_SPAWN_OFFSET = 50  # distance above the top edge
FUEL_SPAWN_OFFSET = 100
ENEMY_LANE_MARGIN = 60
FUEL_LANE_MARGIN = 100
LADDER_RUNGS = 7
LADDER_SPACING = 150
LADDER_FUEL_EVERY = 3
LADDER_FUEL_OFFSET = 75

# Enemy variants: kind -> (weight, width, height, color)
ENEMY_VARIANTS = {
    "enemy_ship": (40, 32, 40, "#334155"),
    "enemy_heli": (40, 32, 30, "#14532d"),
    "enemy_tank": (20, 32, 24, "#1e3a8a"),
}
FUEL_SIZE = (30, 40)
FUEL_COLOR = "#f472b6"

# Combat / projectiles
BULLET_SIZE = (4, 15)
BULLET_SPEED = 12
BULLET_COLOR = "#fbbf24"
BULLET_WING_OFFSET_X = -4  # left rail relative to player x
BULLET_WING_OFFSET_Y = 15
ENEMY_BULLET_SIZE = (6, 6)
ENEMY_BULLET_SPEED = 8
ENEMY_BULLET_COLOR = "#ef4444"
ENEMY_FIRE_CHANCE = 0.015  # per on-screen enemy per step
WEAPONS_UNLOCK_MS = 40000
PROJECTILE_HIT_MARGIN = 10  # player hit-box inset against hostile shots
CONTACT_HIT_MARGIN = 5  # player hit-box inset against direct contact

# Culling
OBJECT_CULL_MARGIN = 50
PROJECTILE_CULL_MARGIN = 20

# Particles
EXPLOSION_PARTICLE_COUNT = 20
EXPLOSION_SPEED = 10  # velocity component spread (centred on zero)
EXPLOSION_SIZE_MIN = 2
EXPLOSION_SIZE_SPREAD = 5
PARTICLE_DECAY = 0.03
TRAIL_LIFE = 0.4
TRAIL_SPEED_MIN = 6
TRAIL_SPEED_SPREAD = 2
TRAIL_SIZE_MIN = 4
TRAIL_SIZE_SPREAD = 4

# Palettes (alternating particle colours per explosion)
PALETTES = {
    "enemy": ("#fbbf24", "#ef4444"),
    "penalty": ("#f472b6", "#be185d"),
    "player": ("#ffffff", "#fbbf24"),
    "trail": ("#f59e0b",),
}

# Audio cues
CUE_ENGINE_START = "engine-start"
CUE_ENGINE_STOP = "engine-stop"
CUE_SHOOT = "shoot"
CUE_EXPLOSION = "explosion"
CUE_REFUEL = "refuel"
AUDIO_CUES = (CUE_ENGINE_START, CUE_ENGINE_STOP, CUE_SHOOT, CUE_EXPLOSION, CUE_REFUEL)

__all__ = [name for name in globals().keys() if name.isupper()]
