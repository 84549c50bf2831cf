from pydantic import BaseModel, Field


class Profile(BaseModel):
    username: str


class Balance(BaseModel):
    available_balance: float = Field(alias="availableBalance")
    play_passes: int = Field(alias="playPasses")


class GameHandle(BaseModel):
    """Server-issued game session, claimed exactly once"""
    game_id: str = Field(alias="gameId")
