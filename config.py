"""
Configuration for the Blum client.

CHANGE GAME PACING OR STATUS HANDLING HERE
"""

# ═══════════════════════════════════════════════════════════
# API ENDPOINTS (fixed hosts)
# ═══════════════════════════════════════════════════════════
PROFILE_URL = "https://gateway.blum.codes/v1/user/me"
BALANCE_URL = "https://game-domain.blum.codes/api/v1/user/balance"
PLAY_URL = "https://game-domain.blum.codes/api/v1/game/play"
CLAIM_URL = "https://game-domain.blum.codes/api/v1/game/claim"

# ═══════════════════════════════════════════════════════════
# REWARD AND PACING
# ═══════════════════════════════════════════════════════════
MIN_POINTS = 170
MAX_POINTS = 220

MIN_SLEEP_SECONDS = 30   # Wait between starting a game and claiming it
MAX_SLEEP_SECONDS = 40
PAUSE_BETWEEN_GAMES_SECONDS = 1
INVALID_CHOICE_PAUSE_SECONDS = 1.5

# ═══════════════════════════════════════════════════════════
# HTTP BEHAVIOUR
# ═══════════════════════════════════════════════════════════
# False: only 401 is treated as an error, any other body is parsed as JSON.
# True: every non-2xx status raises BlumApiError(kind=ErrorKind.STATUS).
STRICT_STATUS_CHECK = False

REQUEST_TIMEOUT_SECONDS = None  # None disables the httpx timeout

# ═══════════════════════════════════════════════════════════
# SESSION
# ═══════════════════════════════════════════════════════════
LOG_DIR = "logs"
