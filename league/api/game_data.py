from fastapi import APIRouter, Depends, HTTPException

from league.core.dependencies import get_storage, get_store
from league.core.store import StateStore
from league.models import GameData
from league.schemas.game_data import LoadResponse, SaveResponse
from league.services.storage import GameDataStorage, StorageError

router = APIRouter(prefix="/game-data", tags=["game-data"])


@router.get("/", response_model=GameData)
async def get_game_data(store: StateStore = Depends(get_store)):
    """Current state in its persisted shape."""
    return store.snapshot()


@router.post("/save", response_model=SaveResponse)
async def save_game_data(
    store: StateStore = Depends(get_store),
    storage: GameDataStorage = Depends(get_storage),
):
    """Snapshot the current state to storage."""
    try:
        return await storage.save(store.snapshot())
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.delete("/", status_code=204)
async def clear_game_data(storage: GameDataStorage = Depends(get_storage)):
    """Delete the stored snapshot. The in-memory state is left as it is."""
    try:
        await storage.clear()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.post("/load", response_model=LoadResponse)
async def load_game_data(
    store: StateStore = Depends(get_store),
    storage: GameDataStorage = Depends(get_storage),
):
    """Replace the current state with the stored snapshot, if any."""
    try:
        game_data = await storage.load()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    if game_data is None:
        return LoadResponse(success=True, message="No saved game data found")

    state = store.restore(game_data)
    return LoadResponse(
        success=True,
        message="Game data loaded",
        players=len(state.players),
        matches=len(state.matches),
        bets=len(state.bets),
    )
