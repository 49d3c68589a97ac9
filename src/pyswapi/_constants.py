"""Internal constants shared across the library."""

from pyswapi import __version__

BASE_URL = "https://swapi.dev/api/"
USER_AGENT = f"pyswapi/{__version__}"

#: Default request timeout in milliseconds.
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_PORT = 3000

# ------------------------------------------------------------------
# Demo selection thresholds
# ------------------------------------------------------------------

LARGE_POPULATION = 1_000_000_000
LARGE_DIAMETER = 10_000
STARSHIPS_LIMIT = 3
MAX_VEHICLE_ID = 4
#: Highest character ID served by SWAPI; the demo cursor wraps back to 1 after it.
MAX_CHARACTER_ID = 83
