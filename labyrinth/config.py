"""
Configuration constants.

Centralizes all magic numbers and configuration values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

from pathlib import Path

# =============================================================================
# GENERAL
# =============================================================================

PROJECT_ROOT_PATH = Path(__file__).resolve().parent.parent

# Directory where rendered maze images are persisted, keyed by maze id.
IMAGES_PATH = PROJECT_ROOT_PATH / "images"

# Highest difficulty level. Colors and minotaur stats saturate here.
MAX_MAZE_ID = 40

# =============================================================================
# MAZE GEOMETRY
# =============================================================================

# Raster cells per wall and per passage in the rendered maze.
DEFAULT_WALL_SIZE = 2
DEFAULT_PASSAGE_SIZE = 2

# Empty border around the maze raster.
MARGIN_SIZE = 0

# Id-scaled ranges for maze dimensions (in maze cells, not raster cells).
# width  in [16 + 2 * (id // 4), min(20 + 2 * (id // 2), 32)]
# height in [ 4 + 2 * (id // 4), min( 6 + 2 * (id // 2), 20)]
WIDTH_BASE_MIN = 16
WIDTH_BASE_MAX = 20
WIDTH_CAP = 32
HEIGHT_BASE_MIN = 4
HEIGHT_BASE_MAX = 6
HEIGHT_CAP = 20

# Growing-tree carving: chance of extending the newest frontier cell instead
# of a random one. 1.0 is a pure depth-first maze, 0.0 is Prim-like.
GROWING_TREE_NEWEST_BIAS = 0.75

# Extra rooms carved on top of the perfect maze.
MIN_ROOMS = 4
MIN_ROOM_SIZE = 4

# =============================================================================
# SPAWNING
# =============================================================================

# Minimum Euclidean distance (exclusive) between spawns and entrance/exit cells.
SPAWN_EXCLUSION_DISTANCE = 6.0

# Rejection-sampling attempts before falling back to exact filtered sampling.
MINOTAUR_SPAWN_ATTEMPTS = 1000

MAX_MINOTAUR_SPEED = 6
BASE_MINOTAUR_VISION = 4
MAX_MINOTAUR_VISION = 7
BASE_MINOTAUR_AGGRESSION = 0.5
MAX_MINOTAUR_AGGRESSION = 1.0

# =============================================================================
# RENDERING
# =============================================================================

# Wall color gradient endpoints: whiteblue at id 0, red at MAX_MAZE_ID.
EASY_WALL_COLOR = (210, 240, 255)
HARD_WALL_COLOR = (208, 28, 28)
WALL_ALPHA = 255

# Traversable cells are fully transparent.
BACKGROUND_COLOR = (0, 0, 0, 0)
