"""Internal constants shared across the library."""

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_BASE_URL = "http://localhost:5000"

# ------------------------------------------------------------------
# Container physics
# ------------------------------------------------------------------

#: Divisor of the simplified ``mass * temperature`` pressure formula.
GAS_CONSTANT = 22.4

INITIAL_TEMPERATURE = 293.0
INITIAL_MASS = 10.0

PRESSURE_LIMIT = 100.0
UPPER_PRESSURE_LIMIT = 150.0
EXPLOSION_LIMIT = 200.0
IMPLOSION_LIMIT = 10.0

#: Largest absolute temperature change (kelvin) applied by one tick.
MAX_TEMPERATURE_DELTA = 15
TICK_INTERVAL = 2.0

# ------------------------------------------------------------------
# Polling actors
# ------------------------------------------------------------------

POLL_INTERVAL = 2.0
RETRY_BACKOFF = 5.0
REQUEST_TIMEOUT = 10.0
ACTOR_PRESSURE_THRESHOLD = 100.0
ACTOR_MIN_AMOUNT = 1
ACTOR_MAX_AMOUNT = 4

# ------------------------------------------------------------------
# Wire endpoints
# ------------------------------------------------------------------

ENDPOINT_GET_STATE = "/GetContainerState"
ENDPOINT_ADD_MASS = "/AddMass"
ENDPOINT_REMOVE_MASS = "/RemoveMass"
ENDPOINT_IS_DESTROYED = "/IsDestroyed"

# ------------------------------------------------------------------
# Mutation outcome messages
# ------------------------------------------------------------------

MSG_MASS_INCREASED = "Mass successfully increased."
MSG_MASS_DECREASED = "Mass successfully decreased."
MSG_PRESSURE_TOO_HIGH = "Pressure too high to add mass."
MSG_PRESSURE_TOO_LOW = "Pressure too low to remove mass."
