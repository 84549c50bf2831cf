import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from config import (
    BALANCE_URL,
    CLAIM_URL,
    PLAY_URL,
    PROFILE_URL,
    REQUEST_TIMEOUT_SECONDS,
    STRICT_STATUS_CHECK,
)
from .blum_api_request import BlumSession, ClaimRequest
from .blum_api_response import Balance, GameHandle, Profile
from .blum_errors import BlumApiError, ErrorKind, InvalidToken

logger = logging.getLogger(__name__)


class BlumApiClient:
    """
    Authenticated client for the four Blum game endpoints.

    Each request is attempted once. A 401 always raises InvalidToken.
    Other statuses are only checked when strict_status is enabled.
    """

    def __init__(self,
                 session: BlumSession,
                 strict_status: bool = STRICT_STATUS_CHECK,
                 timeout: Optional[float] = REQUEST_TIMEOUT_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.session = session
        self.strict_status = strict_status
        self.client = httpx.AsyncClient(
            headers=session.headers(),
            timeout=httpx.Timeout(timeout),
            transport=transport
        )

    async def get_profile(self) -> Profile:
        response = await self._request("GET", PROFILE_URL)
        return self._parse(response, Profile)

    async def get_balance(self) -> Balance:
        response = await self._request("GET", BALANCE_URL)
        return self._parse(response, Balance)

    async def start_game(self) -> GameHandle:
        response = await self._request("POST", PLAY_URL)
        return self._parse(response, GameHandle)

    async def claim_reward(self, game_id: str, points: int) -> None:
        payload = ClaimRequest(gameId=game_id, points=points)
        await self._request("POST", CLAIM_URL, payload.model_dump(by_alias=True))

    async def _request(self, method: str, url: str,
                       payload: Optional[dict] = None) -> httpx.Response:
        """
        Send a single request and apply the status rules.

        Args:
            method: "GET" or "POST"
            url: Absolute endpoint URL
            payload: Optional JSON body

        Returns:
            The raw httpx response

        Raises:
            InvalidToken: On HTTP 401
            BlumApiError: On transport failure, or non-2xx in strict mode
        """
        logger.debug(f"{method} {url}")
        try:
            response = await self.client.request(method, url, json=payload)
        except httpx.HTTPError as e:
            raise BlumApiError(f"Request to {url} failed: {e}", ErrorKind.TRANSPORT) from e

        if response.status_code == httpx.codes.UNAUTHORIZED:
            logger.warning(f"{method} {url} returned 401")
            raise InvalidToken()

        if not response.is_success:
            if self.strict_status:
                raise BlumApiError(
                    f"{method} {url} returned {response.status_code}: {response.text}",
                    ErrorKind.STATUS,
                    status_code=response.status_code
                )
            logger.warning(f"{method} {url} returned {response.status_code}, parsing body anyway")

        return response

    @staticmethod
    def _parse(response: httpx.Response, model: Any):
        """Deserialize a JSON body into the given pydantic model"""
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            raise BlumApiError(
                f"Unexpected response from {response.request.url}: {e}",
                ErrorKind.PARSE,
                status_code=response.status_code
            ) from e

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
