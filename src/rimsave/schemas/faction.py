from pydantic import BaseModel, Field

from .pawn import PawnRead


class RelationRead(BaseModel):
    kind: str = Field(..., description="Hostile, Neutral or Ally")
    goodwill: int


class FactionRead(BaseModel):
    id: int = Field(..., ge=0, description="Load id from the save")
    str_id: str = Field(..., description="Canonical faction key")
    name: str
    def_name: str
    leader_id: str | None = None
    is_player: bool = False


class FactionDetail(FactionRead):
    relations: dict[str, RelationRead] = Field(default_factory=dict)
    leader: PawnRead | None = None
    pawns: list[PawnRead] = Field(default_factory=list)
