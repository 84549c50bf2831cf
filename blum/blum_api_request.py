from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class BlumSession(BaseModel):
    """
    Holds the bearer token for the lifetime of the process.
    Frozen: the token is sent verbatim and never changes after startup.
    """
    model_config = ConfigDict(frozen=True)

    authorization_token: str

    def headers(self) -> Dict[str, str]:
        """Build the headers attached to every request"""
        return {"Authorization": self.authorization_token}


class ClaimRequest(BaseModel):
    game_id: str = Field(alias="gameId")
    points: int
