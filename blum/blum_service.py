import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional, Set

from pydantic import BaseModel

from config import MAX_POINTS, MAX_SLEEP_SECONDS, MIN_POINTS, MIN_SLEEP_SECONDS
from .blum_api_client import BlumApiClient
from .blum_api_response import GameHandle

logger = logging.getLogger(__name__)


class GameResult(BaseModel):
    """Outcome of one start-wait-claim cycle"""
    game_id: str
    points: int
    waited_seconds: int


class BlumService:

    def __init__(self,
                 client: BlumApiClient,
                 rng: Optional[random.Random] = None,
                 sleep: Callable[[float], Awaitable[None]] = asyncio.sleep):
        """
        Wrap the API client with the game flow.

        Args:
            client: Authenticated API client
            rng: Generator reused for every draw (seeded from OS entropy by default)
            sleep: Awaitable sleep, replaced in tests
        """
        self.client = client
        self.rng = rng or random.Random()
        self.sleep = sleep
        self._claimed_game_ids: Set[str] = set()

    def draw_points(self) -> int:
        return self.rng.randint(MIN_POINTS, MAX_POINTS)

    def draw_sleep_seconds(self) -> int:
        return self.rng.randint(MIN_SLEEP_SECONDS, MAX_SLEEP_SECONDS)

    async def play_game(
        self,
        on_started: Optional[Callable[[GameHandle, int], None]] = None
    ) -> GameResult:
        """
        Start a game, wait a randomized interval, then claim it.

        Args:
            on_started: Called with the handle and the wait before sleeping

        Returns:
            GameResult with the claimed id, points and the wait used
        """
        handle = await self.client.start_game()
        points = self.draw_points()
        wait_seconds = self.draw_sleep_seconds()
        logger.info(f"Game {handle.game_id} started, claiming {points} points in {wait_seconds}s")

        if on_started:
            on_started(handle, wait_seconds)

        await self.sleep(wait_seconds)
        await self.claim_reward(handle.game_id, points)

        return GameResult(game_id=handle.game_id, points=points,
                          waited_seconds=wait_seconds)

    async def claim_reward(self, game_id: str, points: Optional[int] = None) -> int:
        """
        Claim the reward for a game that has already started.

        Args:
            game_id: Identifier returned when the game was started
            points: Points to claim, drawn at random when omitted

        Returns:
            The points that were claimed
        """
        if game_id in self._claimed_game_ids:
            raise ValueError(f"Game {game_id} has already been claimed")

        if points is None:
            points = self.draw_points()

        await self.client.claim_reward(game_id, points)
        self._claimed_game_ids.add(game_id)
        logger.info(f"Claimed {points} points for game {game_id}")
        return points
