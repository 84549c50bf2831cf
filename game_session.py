import asyncio
import random
from datetime import datetime
from typing import Awaitable, Callable, Optional

import httpx

from blum import BlumApiClient, BlumService, BlumSession, InvalidToken
from config import INVALID_CHOICE_PAUSE_SECONDS, PAUSE_BETWEEN_GAMES_SECONDS
from display_manager import DisplayManager
from game_logger import GameLogger


class GameSession:

    def __init__(self,
                 token: str,
                 display: Optional[DisplayManager] = None,
                 logger: Optional[GameLogger] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 rng: Optional[random.Random] = None,
                 sleep: Callable[[float], Awaitable[None]] = asyncio.sleep):
        """
        Initialize the session with the user's token.
        The HTTP client is only opened inside play().
        """
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.display = display or DisplayManager()

        # A logger we create ourselves is closed when the session ends
        self._owns_logger = logger is None
        self.logger = logger or GameLogger.get_instance(self.session_id)
        self.logger.logger.info(f"Initializing GameSession with ID: {self.session_id}")

        self.blum_session = BlumSession(authorization_token=token)
        self.transport = transport
        self.rng = rng
        self.sleep = sleep

        self.client: Optional[BlumApiClient] = None
        self.service: Optional[BlumService] = None

        self.username: Optional[str] = None
        self.games_played = 0
        self.points_claimed = 0

    async def play(self):
        """
        Main menu loop. Runs until an error occurs or the process is interrupted.
        Both error tiers end the session after a message is shown.
        """
        try:
            async with BlumApiClient(self.blum_session, transport=self.transport) as client:
                self.client = client
                self.service = BlumService(client, rng=self.rng, sleep=self.sleep)
                await self.__menu_loop()

        except InvalidToken as e:
            self.logger.log_error(f"Invalid token: {e}")
            self.display.show_invalid_token(str(e))
        except Exception as e:
            self.logger.log_error(str(e))
            self.display.show_error(str(e))
        finally:
            self.logger.log_session_end(self.games_played, self.points_claimed)
            if self._owns_logger:
                self.logger.close()

    async def __menu_loop(self):
        # A rejected token must stop us before the menu is shown
        profile = await self.client.get_profile()
        self.username = profile.username
        self.logger.log_session_start(self.username)

        while True:
            choice = self.display.ask_menu_choice(self.username)

            if choice == "1":
                await self.__play_games()
            elif choice == "2":
                await self.__claim_known_game()
            else:
                self.display.show_invalid_choice()
                await self.sleep(INVALID_CHOICE_PAUSE_SECONDS)

    async def __play_games(self):
        """
        Show the balance, ask how many games to play, then play them one by one.
        The balance shown after each game is tracked locally.
        """
        balance = await self.client.get_balance()
        available_balance = balance.available_balance
        self.logger.log_balance(available_balance, balance.play_passes)
        self.display.show_balance(available_balance, balance.play_passes)

        while True:
            # Non-numeric input raises ValueError and ends the session
            games_count = int(self.display.ask_games_count())
            if 0 < games_count <= balance.play_passes:
                break
            self.display.show_invalid_count()

        for game_number in range(1, games_count + 1):
            self.display.show_game_processing(game_number)

            def on_started(handle, wait_seconds, game_number=game_number):
                self.logger.log_game_start(game_number, handle.game_id, wait_seconds)
                self.display.show_game_started(game_number, handle.game_id, wait_seconds)

            result = await self.service.play_game(on_started=on_started)

            available_balance += result.points
            self.games_played += 1
            self.points_claimed += result.points
            self.logger.log_claim(result.game_id, result.points, available_balance)
            self.display.show_game_processed(game_number, result.points, available_balance)

            await self.sleep(PAUSE_BETWEEN_GAMES_SECONDS)

        self.display.show_all_games_processed()
        self.display.wait_for_enter()

    async def __claim_known_game(self):
        """Claim random points for a game id the user already has"""
        game_id = self.display.ask_game_id()
        points = await self.service.claim_reward(game_id)

        self.points_claimed += points
        self.logger.log_claim(game_id, points)
        self.display.show_claim_success(points, game_id)
        self.display.wait_for_enter()
