import logging
import os
from datetime import datetime
from typing import Optional

from config import LOG_DIR


class GameLogger:
    """
    Centralized logging for a client run.
    Creates a new log file for each session and captures all important events.
    Module loggers under the "blum" package are routed to the same file.
    """

    _instance = None

    def __init__(self, session_id: str, log_dir: str = LOG_DIR):
        """
        Initialize the game logger for a specific session.

        Args:
            session_id: The session identifier
            log_dir: Directory that receives the log file
        """
        self.session_id = session_id
        self.log_dir = str(log_dir)

        # Create logs directory if it doesn't exist
        os.makedirs(self.log_dir, exist_ok=True)

        self.log_file = os.path.join(self.log_dir, f"blum_{session_id}.log")

        # Clear/reset the log file for this session
        with open(self.log_file, 'w') as f:
            f.write(f"=== Blum Session Log ===\n")
            f.write(f"Session ID: {session_id}\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write("=" * 80 + "\n\n")

        self.logger = logging.getLogger(f"BlumSession_{session_id}")
        self.logger.setLevel(logging.DEBUG)

        # Remove any existing handlers
        self.logger.handlers = []

        self.file_handler = logging.FileHandler(self.log_file, mode='a')
        self.file_handler.setLevel(logging.DEBUG)

        # Format: timestamp - level - message
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        self.file_handler.setFormatter(formatter)

        self.logger.addHandler(self.file_handler)

        # API client and service log through logging.getLogger(__name__)
        package_logger = logging.getLogger("blum")
        package_logger.setLevel(logging.DEBUG)
        package_logger.handlers = [self.file_handler]
        package_logger.propagate = False

        self.logger.info("Logger initialized")

    def log_session_start(self, username: str):
        """Log a successful profile lookup"""
        self.logger.info("=" * 80)
        self.logger.info(f"SESSION START - User: {username}")
        self.logger.info("=" * 80)

    def log_balance(self, available_balance: float, play_passes: int):
        self.logger.info(f"BALANCE: {available_balance:.2f}, play passes: {play_passes}")

    def log_game_start(self, game_number: int, game_id: str, wait_seconds: int):
        self.logger.info(f"GAME {game_number} STARTED - ID: {game_id}, waiting {wait_seconds}s")

    def log_claim(self, game_id: str, points: int, balance: Optional[float] = None):
        """Log a claimed reward"""
        if balance is None:
            self.logger.info(f"CLAIM: {points} points for game {game_id}")
        else:
            self.logger.info(f"CLAIM: {points} points for game {game_id}, balance now {balance:.2f}")

    def log_error(self, error: str):
        """Log an error"""
        self.logger.error(f"ERROR: {error}")

    def log_session_end(self, games_played: int, points_claimed: int):
        """Log session end"""
        self.logger.info("\n" + "=" * 80)
        self.logger.info(f"SESSION END - Games played: {games_played}, Points claimed: {points_claimed}")
        self.logger.info("=" * 80)

    def close(self):
        """Detach and close the file handler"""
        self.logger.removeHandler(self.file_handler)
        package_logger = logging.getLogger("blum")
        if self.file_handler in package_logger.handlers:
            package_logger.removeHandler(self.file_handler)
        self.file_handler.close()

        if GameLogger._instance is self:
            GameLogger._instance = None

    @classmethod
    def get_instance(cls, session_id: Optional[str] = None, log_dir: str = LOG_DIR):
        """Get or create the singleton logger instance"""
        if cls._instance is None or (session_id and cls._instance.session_id != session_id):
            if session_id is None:
                raise ValueError("session_id required for first initialization")
            # The previous session's file is finished
            if cls._instance is not None:
                cls._instance.close()
            cls._instance = cls(session_id, log_dir=log_dir)
        return cls._instance
