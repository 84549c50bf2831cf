import asyncio
import sys

from display_manager import DisplayManager
from game_session import GameSession


async def main():
    display = DisplayManager()

    # Read once at startup and used verbatim
    token = display.ask_token()

    session = GameSession(token=token, display=display)
    await session.play()


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        # Clean exit without traceback
        DisplayManager().show_goodbye()
        sys.exit(0)


# Run the async main function
if __name__ == "__main__":
    run()
