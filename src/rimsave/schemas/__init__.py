from .faction import FactionDetail, FactionRead, RelationRead
from .game import GameRead, SaveSummary
from .pawn import NameRead, PawnDetail, PawnRead, RelativeRead

__all__ = [
    "FactionDetail",
    "FactionRead",
    "GameRead",
    "NameRead",
    "PawnDetail",
    "PawnRead",
    "RelationRead",
    "RelativeRead",
    "SaveSummary",
]
