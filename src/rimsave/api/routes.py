"""HTTP routes exposing built save games read-only."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from rimsave import __version__
from rimsave.api.runtime import (
    ApiState,
    LoadedSave,
    to_faction_detail,
    to_game_read,
    to_pawn_detail,
    to_summary,
)
from rimsave.schemas import FactionDetail, GameRead, PawnDetail, SaveSummary

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def _too_large() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        detail="save document too large",
    )


async def _read_body(request: Request, *, limit: int) -> bytes:
    """Read the request body, stopping as soon as it exceeds ``limit`` bytes."""

    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise _too_large()

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise _too_large()
    return bytes(body)


def _get_save(state: ApiState, save_id: str) -> LoadedSave:
    try:
        return state.saves.get(save_id)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="save not found") from exc


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "version": __version__,
        "loaded_saves": len(state.saves.list_saves()),
    }


@router.post("/saves", response_model=SaveSummary, status_code=status.HTTP_201_CREATED)
async def upload_save(request: Request, state: ApiStateDep) -> SaveSummary:
    body = await _read_body(request, limit=state.settings.max_upload_bytes)
    if not body:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="empty request body")
    loaded = await state.saves.load_async(body)
    return to_summary(loaded)


@router.get("/saves", response_model=list[SaveSummary])
async def list_saves(state: ApiStateDep) -> list[SaveSummary]:
    return [to_summary(loaded) for loaded in state.saves.list_saves()]


@router.get("/saves/{save_id}", response_model=GameRead)
async def get_save(save_id: str, state: ApiStateDep) -> GameRead:
    return to_game_read(_get_save(state, save_id))


@router.delete("/saves/{save_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_save(save_id: str, state: ApiStateDep) -> Response:
    _get_save(state, save_id)
    state.saves.delete(save_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/saves/{save_id}/factions/{faction_id}", response_model=FactionDetail)
async def get_faction(save_id: str, faction_id: str, state: ApiStateDep) -> FactionDetail:
    game = _get_save(state, save_id).game
    faction = game.get_faction(faction_id)
    if faction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="faction not found")
    return to_faction_detail(game, faction)


@router.get("/saves/{save_id}/pawns/{pawn_id}", response_model=PawnDetail)
async def get_pawn(save_id: str, pawn_id: str, state: ApiStateDep) -> PawnDetail:
    game = _get_save(state, save_id).game
    pawn = game.get_pawn(pawn_id)
    if pawn is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="pawn not found")
    return to_pawn_detail(game, pawn)
