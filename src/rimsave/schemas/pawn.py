from pydantic import BaseModel, Field


class NameRead(BaseModel):
    kind: str = Field(..., description="null, single or triple")
    first: str
    last: str
    nick: str
    full_name: str = Field(..., description="Display form with the nickname quoted")


class PawnRead(BaseModel):
    id: str = Field(..., description="Thing identifier from the save")
    name: NameRead
    def_name: str
    gender: str
    alive: bool
    seen: bool = Field(..., description="Whether the player has ever seen this pawn")
    faction_id: str | None = Field(None, description="Key of the owning faction")


class RelativeRead(BaseModel):
    pawn_id: str
    full_name: str
    kind: str = Field(..., description="Relationship def, e.g. Parent or Spouse")


class PawnDetail(PawnRead):
    relations: dict[str, str] = Field(
        default_factory=dict, description="Raw relations keyed by other pawn id"
    )
    relatives: list[RelativeRead] = Field(
        default_factory=list, description="Relations whose target is present in the save"
    )
