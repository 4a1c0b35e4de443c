"""Unit tests for the API runtime helpers."""

from __future__ import annotations

import pytest

from rimsave.api.runtime import (
    ApiState,
    SaveService,
    preloaded_state_factory,
    to_faction_detail,
    to_game_read,
    to_pawn_detail,
    to_summary,
)
from rimsave.config import Settings
from rimsave.domain.errors import MissingPlayerFactionError, MissingRootError


def test_service_registers_and_evicts(sample_save_bytes):
    service = SaveService(capacity=2)
    first = service.load(sample_save_bytes)
    second = service.load(sample_save_bytes)
    third = service.load(sample_save_bytes)

    assert [s.id for s in service.list_saves()] == [second.id, third.id]
    with pytest.raises(KeyError):
        service.get(first.id)
    assert service.get(third.id) is third


def test_failed_build_registers_nothing():
    service = SaveService(capacity=2)
    with pytest.raises(MissingPlayerFactionError):
        service.load(b"<savegame><game /></savegame>")
    assert service.list_saves() == []


def test_delete(sample_save_bytes):
    service = SaveService(capacity=2)
    loaded = service.load(sample_save_bytes)
    service.delete(loaded.id)
    assert service.list_saves() == []


@pytest.mark.asyncio
async def test_load_async(sample_save_bytes):
    service = SaveService(capacity=1)
    loaded = await service.load_async(sample_save_bytes)
    assert service.get(loaded.id).game.player_faction.str_id == "Faction_1"


def test_summary_and_detail_views(sample_save_bytes):
    loaded = SaveService(capacity=1).load(sample_save_bytes)
    game = loaded.game

    summary = to_summary(loaded)
    assert summary.faction_count == 3
    assert summary.pawn_count == 4
    assert summary.colonist_count == 2
    assert summary.player_faction.is_player is True

    full = to_game_read(loaded)
    assert [p.id for p in full.pawns] == ["Human300", "Human101", "Human102", "Human200"]

    colony = to_faction_detail(game, game.player_faction)
    assert colony.leader is not None
    assert colony.leader.id == "Human101"
    assert colony.relations["Faction_2"].kind == "Hostile"
    assert [p.id for p in colony.pawns] == ["Human101", "Human102"]

    wren = to_pawn_detail(game, game.pawns["Human102"])
    assert wren.name.full_name == "'Wren'"
    assert wren.gender == "female"
    assert wren.faction_id == "Faction_1"
    assert [(r.pawn_id, r.kind) for r in wren.relatives] == [("Human101", "Spouse")]


def test_api_state_uses_settings():
    state = ApiState(settings=Settings(max_loaded_saves=3))
    assert state.settings.max_loaded_saves == 3


def test_preloaded_state_factory(sample_save_path):
    factory = preloaded_state_factory([sample_save_path, str(sample_save_path)])
    state = factory()
    saves = state.saves.list_saves()
    assert len(saves) == 2
    assert all(s.game.player_faction.name == "New Arrivals" for s in saves)


def test_preloaded_state_factory_stops_on_bad_save(tmp_path):
    broken = tmp_path / "broken.rws"
    broken.write_bytes(b"<savegame><meta /></savegame>")
    factory = preloaded_state_factory([broken])
    with pytest.raises(MissingRootError):
        factory()
