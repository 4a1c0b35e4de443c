"""Runtime primitives backing the HTTP API."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from uuid import uuid4

from rimsave import savegame
from rimsave.config import Settings, get_settings
from rimsave.domain.models import Faction, Game, Pawn
from rimsave.schemas import (
    FactionDetail,
    FactionRead,
    GameRead,
    NameRead,
    PawnDetail,
    PawnRead,
    RelationRead,
    RelativeRead,
    SaveSummary,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadedSave:
    """A built game together with its registry metadata."""

    id: str
    game: Game
    loaded_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class SaveService:
    """In-memory registry of built games, oldest evicted first."""

    def __init__(self, *, capacity: int) -> None:
        self._capacity = capacity
        self._saves: OrderedDict[str, LoadedSave] = OrderedDict()

    def register(self, game: Game) -> LoadedSave:
        loaded = LoadedSave(id=uuid4().hex, game=game)
        self._saves[loaded.id] = loaded
        while len(self._saves) > self._capacity:
            evicted, _ = self._saves.popitem(last=False)
            logger.info("evicted save %s", evicted)
        return loaded

    def load(self, data: bytes) -> LoadedSave:
        """Build a game from raw bytes and register it.

        Build failures propagate unchanged; nothing is registered for them.
        """

        return self.register(savegame.parse_game(data))

    async def load_async(self, data: bytes) -> LoadedSave:
        """Like :meth:`load`, building the game off the event loop."""

        return self.register(await asyncio.to_thread(savegame.parse_game, data))

    def get(self, save_id: str) -> LoadedSave:
        """Return a registered save or raise ``KeyError``."""

        return self._saves[save_id]

    def list_saves(self) -> list[LoadedSave]:
        return list(self._saves.values())

    def delete(self, save_id: str) -> None:
        del self._saves[save_id]


def to_pawn_read(pawn: Pawn) -> PawnRead:
    return PawnRead(
        id=pawn.id,
        name=NameRead(
            kind=pawn.name.kind.value,
            first=pawn.name.first,
            last=pawn.name.last,
            nick=pawn.name.nick,
            full_name=pawn.name.full_name,
        ),
        def_name=pawn.def_name,
        gender=pawn.gender.value,
        alive=pawn.alive,
        seen=pawn.seen,
        faction_id=pawn.faction.str_id if pawn.faction is not None else None,
    )


def to_pawn_detail(game: Game, pawn: Pawn) -> PawnDetail:
    relatives = [
        RelativeRead(pawn_id=other.id, full_name=other.name.full_name, kind=kind)
        for other, kind in game.relatives_of(pawn)
    ]
    return PawnDetail(
        **to_pawn_read(pawn).model_dump(),
        relations=dict(pawn.relations),
        relatives=relatives,
    )


def to_faction_read(game: Game, faction: Faction) -> FactionRead:
    return FactionRead(
        id=faction.id,
        str_id=faction.str_id,
        name=faction.name,
        def_name=faction.def_name,
        leader_id=faction.leader_id,
        is_player=faction is game.player_faction,
    )


def to_faction_detail(game: Game, faction: Faction) -> FactionDetail:
    leader = game.leader_of(faction)
    return FactionDetail(
        **to_faction_read(game, faction).model_dump(),
        relations={
            key: RelationRead(kind=relation.kind.value, goodwill=relation.goodwill)
            for key, relation in faction.relations.items()
        },
        leader=to_pawn_read(leader) if leader is not None else None,
        pawns=[to_pawn_read(pawn) for pawn in game.pawns_of(faction)],
    )


def to_summary(loaded: LoadedSave) -> SaveSummary:
    game = loaded.game
    return SaveSummary(
        id=loaded.id,
        loaded_at=loaded.loaded_at,
        player_faction=to_faction_read(game, game.player_faction),
        faction_count=len(game.factions),
        pawn_count=len(game.pawns),
        colonist_count=len(game.colonists()),
    )


def to_game_read(loaded: LoadedSave) -> GameRead:
    game = loaded.game
    return GameRead(
        **to_summary(loaded).model_dump(),
        factions=[to_faction_read(game, faction) for faction in game.factions.values()],
        pawns=[to_pawn_read(pawn) for pawn in game.pawns.values()],
    )


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.saves = SaveService(capacity=self.settings.max_loaded_saves)


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()


def preloaded_state_factory(
    paths: Iterable[Path | str], *, settings: Settings | None = None
) -> Callable[[], ApiState]:
    """Return a state factory that builds the given save files at startup.

    A save that fails to build aborts startup with its :class:`SaveFormatError`.
    """

    save_paths = [Path(path) for path in paths]

    def factory() -> ApiState:
        state = ApiState(settings=settings)
        for path in save_paths:
            loaded = state.saves.register(savegame.load_game(path))
            logger.info("preloaded %s as save %s", path, loaded.id)
        return state

    return factory
