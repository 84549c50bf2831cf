"""Tests for the startup path in main.py"""
import asyncio
from typing import List

import pytest

import main


class StubDisplay:
    """Returns a fixed token and counts prompts"""

    instances: List["StubDisplay"] = []

    def __init__(self, token: str = "  query_id=AAE&hash=ff  "):
        self.token = token
        self.token_prompts = 0
        StubDisplay.instances.append(self)

    def ask_token(self) -> str:
        self.token_prompts += 1
        return self.token


class StubSession:
    """Records the constructor arguments and whether play() ran"""

    created: List["StubSession"] = []

    def __init__(self, token, display):
        self.token = token
        self.display = display
        self.played = False
        StubSession.created.append(self)

    async def play(self):
        self.played = True


@pytest.fixture(autouse=True)
def stubs(monkeypatch):
    StubDisplay.instances = []
    StubSession.created = []
    monkeypatch.setattr(main, "DisplayManager", StubDisplay)
    monkeypatch.setattr(main, "GameSession", StubSession)


class TestStartupToken:

    def test_token_prompted_once_and_passed_verbatim(self):
        asyncio.run(main.main())

        assert len(StubDisplay.instances) == 1
        display = StubDisplay.instances[0]
        assert display.token_prompts == 1

        assert len(StubSession.created) == 1
        session = StubSession.created[0]
        assert session.token == "  query_id=AAE&hash=ff  "
        assert session.display is display
        assert session.played

    def test_environment_is_ignored(self, monkeypatch):
        monkeypatch.setenv("BLUM_TOKEN", "from-env")

        asyncio.run(main.main())

        assert StubDisplay.instances[0].token_prompts == 1
        assert StubSession.created[0].token == "  query_id=AAE&hash=ff  "

    def test_run_exits_cleanly_on_ctrl_c(self, monkeypatch):
        goodbyes = []

        def interrupted(coro):
            coro.close()
            raise KeyboardInterrupt

        monkeypatch.setattr(main.asyncio, "run", interrupted)
        monkeypatch.setattr(StubDisplay, "show_goodbye", lambda self: goodbyes.append(True),
                            raising=False)

        with pytest.raises(SystemExit) as exc_info:
            main.run()

        assert exc_info.value.code == 0
        assert goodbyes == [True]
