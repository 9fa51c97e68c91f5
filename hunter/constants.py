"""Gameplay and tuning constants.

Centralizes numeric tuning values so physics, entities, the player and the
level generator agree on them. Durations are in ticks (one tick per frame).
"""

import math

# Timing
TICKS_PER_SECOND = 60

# View
VIEW_WIDTH = 960
VIEW_HEIGHT = 600

# Physics
GRAVITY = 0.5  # added to vy per tick while airborne
GROUND_FRICTION = 0.8  # vx multiplier while grounded
AIR_FRICTION = 0.95  # vx multiplier while airborne
VELOCITY_SNAP = 0.1  # |vx| below this snaps to 0
LANDING_TOLERANCE = 5  # how far above a platform top the previous bottom may be

# Animals
EDGE_LOOKAHEAD = 10  # horizontal margin scanned ahead for supporting ground
EDGE_TOP_BAND = 10  # only the top of a platform counts as support
CLIMB_EDGE_TOLERANCE = 10  # squirrel must be this close to a platform edge
CLIMB_ALIGN_TOLERANCE = 50  # target platform edge alignment window
CLIMB_REACH = 150  # max vertical distance to a climb target
COLLECTIBLE_SPAWN_VY = -5
COLLECTIBLE_ROTATION_SPEED = 0.05
FULL_TURN = math.pi * 2

# Player
PLAYER_SIZE = (50, 50)
PLAYER_SPEED = 5
PLAYER_SPRINT_SPEED = 8
PLAYER_JUMP_POWER = 12
POWERED_UP_SPEED = 7
POWERED_UP_SPRINT_SPEED = 11
SICK_SPEED = 3
SICK_SPRINT_SPEED = 5
MAX_SPRINT_METER = 100
SPRINT_DRAIN_RATE = 2
SPRINT_RECHARGE_RATE = 1
POWERED_UP_DRAIN_FACTOR = 0.5
SPRINT_COOLDOWN_TICKS = 2 * TICKS_PER_SECOND  # 2000ms at the nominal rate
POWER_UP_TICKS = 300
SICKNESS_TICKS = 900
PLAYER_SPAWN_X = 100
PLAYER_SPAWN_ABOVE_FLOOR = 150  # spawn y = view height - this

# Level generation
BASE_LEVEL_WIDTH = 5000
LEVEL_WIDTH_STEP = 1000
BASE_POINTS_TO_ADVANCE = 100
POINTS_TO_ADVANCE_STEP = 50
GROUND_OFFSET = 50  # ground top = view height - this
GROUND_SEGMENT_HEIGHT = 50
GROUND_SEGMENT_MIN_WIDTH = 200
GROUND_SEGMENT_MAX_WIDTH = 700
GAP_MIN_WIDTH = 50
PLATFORM_MIN_WIDTH = 100
PLATFORM_MAX_WIDTH = 300
PLATFORM_MIN_HEIGHT = 20
PLATFORM_MAX_HEIGHT = 40
PLATFORM_HEIGHT_VARIATION = 150
PLATFORM_MIN_RISE = 50  # elevated platforms sit at least this far above ground
ROUNDED_PLATFORM_CHANCE = 0.3
MAX_PLATFORM_DENSITY = 0.9
MAX_GAP_FREQUENCY = 0.4
SPAWN_MARGIN = 50  # animals spawn this far inside the level bounds
PLATFORM_MATCH_TOLERANCE = 5
ELEVATED_CLEARANCE = 10  # platform tops above ground - this count as elevated
BIRD_MIN_Y = 50
BIRD_GROUND_CLEARANCE = 150

# Orchestration
BONE_DROP_CHANCE = 0.3
TREAT_DROP_CHANCE = 0.1
FALL_OUT_MARGIN = 100  # below view height + this the run is over
LEVEL_END_MARGIN = 100  # reaching level width - this advances
CAMERA_SMOOTHING = 0.1
NOTIFICATION_TICKS = 2 * TICKS_PER_SECOND
LEVEL_NOTIFICATION_TICKS = 3 * TICKS_PER_SECOND

# Persistence
MAX_SAVED_LEVEL = 999  # higher levels in a save file are treated as tampering

__all__ = [name for name in globals().keys() if name.isupper()]
