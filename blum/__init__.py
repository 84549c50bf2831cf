from .blum_api_client import BlumApiClient
from .blum_api_request import BlumSession, ClaimRequest
from .blum_api_response import Balance, GameHandle, Profile
from .blum_errors import BlumApiError, ErrorKind, InvalidToken
from .blum_service import BlumService, GameResult


# Export public API
__all__ = [
    'BlumApiClient', 'BlumService', 'BlumSession', 'ClaimRequest',
    'Profile', 'Balance', 'GameHandle', 'GameResult',
    'BlumApiError', 'ErrorKind', 'InvalidToken',
]
