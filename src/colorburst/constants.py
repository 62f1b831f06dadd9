FIELD_WIDTH = 800
FIELD_HEIGHT = 900

# Staggered grid geometry. Odd rows hold one fewer slot than even rows.
GRID_ROWS = 10
GRID_COLS = 15
BUBBLE_RADIUS = 20
BUBBLE_SPACING = 42
ROW_HEIGHT_FACTOR = 0.87

# Rows populated when a level starts, and the chance each slot receives a bubble.
SEED_ROWS = 5
SEED_FILL_CHANCE = 0.8

# Shooter placement is measured up from the bottom edge of the field.
SHOOTER_BOTTOM_MARGIN = 60
LAUNCH_OFFSET = 30
PROJECTILE_SPEED = 12.0
INITIAL_AIM_ANGLE = -1.5707963267948966
AIM_MARGIN = 0.3

# A bubble whose bottom edge passes this far above the shooter costs a life.
FAILURE_LINE_MARGIN = 50

POP_STEP = 0.1
MATCH_THRESHOLD = 3
AREA_CLEAR_RADIUS = 2
POWER_UP_CHANCE = 0.1

MATCH_POINTS = 10
DROP_POINTS = 15
AREA_CLEAR_POINTS = 20

STARTING_LIVES = 3
MAX_LEVEL = 20

# Display palette for the host renderer (RGB).
BUBBLE_PALETTE = {
    'red': (255, 71, 87),        # #FF4757
    'blue': (83, 82, 237),       # #5352ED
    'green': (46, 213, 115),     # #2ED573
    'yellow': (255, 165, 2),     # #FFA502
    'purple': (165, 94, 234),    # #A55EEA
    'orange': (255, 99, 72),     # #FF6348
    'cyan': (0, 210, 211),       # #00D2D3
    'pink': (255, 107, 157),     # #FF6B9D
    'rainbow': (255, 255, 255),  # #FFFFFF
    'bomb': (47, 53, 66),        # #2F3542
    'freeze': (112, 161, 255),   # #70A1FF
}
BACKGROUND_COLOR = (45, 53, 97)  # #2D3561
