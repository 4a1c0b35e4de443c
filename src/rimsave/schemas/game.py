from datetime import datetime

from pydantic import BaseModel, Field

from .faction import FactionRead
from .pawn import PawnRead


class SaveSummary(BaseModel):
    id: str = Field(..., description="Identifier of the loaded save")
    loaded_at: datetime
    player_faction: FactionRead
    faction_count: int = Field(..., ge=1)
    pawn_count: int = Field(..., ge=0)
    colonist_count: int = Field(..., ge=0)


class GameRead(SaveSummary):
    factions: list[FactionRead]
    pawns: list[PawnRead]
