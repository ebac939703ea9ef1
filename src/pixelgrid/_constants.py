"""Internal constants shared across the library."""

ONLINE_URL = "https://edu.jakobmeier.ch/api/color"
LOCAL_URL = "http://localhost:5085/api/color"
USER_AGENT = "pixelgrid/1"

DEFAULT_GRID_SIZE = 16
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# ------------------------------------------------------------------
# Team palette  (id -> (Red, Green, Blue))
# ------------------------------------------------------------------

TEAM_COLORS: tuple[tuple[int, int, int], ...] = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
    (128, 0, 0),
    (0, 128, 0),
    (0, 0, 128),
    (128, 128, 0),
    (128, 0, 128),
    (0, 128, 128),
    (192, 192, 192),
    (128, 128, 128),
    (255, 128, 0),
    (0, 128, 255),
)
