from typing import List

from fastapi import APIRouter, Depends, HTTPException

from league.core import leaderboard
from league.core.actions import AddPlayer, DeletePlayer
from league.core.dependencies import get_store
from league.core.players import find_player_by_name
from league.core.store import StateStore
from league.models import Player
from league.schemas.players import CreatePlayerRequest, LeaderboardEntry

router = APIRouter(prefix="/players", tags=["players"])


@router.get("/", response_model=List[Player])
async def list_players(store: StateStore = Depends(get_store)):
    """List every player on the roster."""
    return list(store.state.players.values())


@router.post("/", response_model=Player, status_code=201)
async def create_player(
    player_data: CreatePlayerRequest,
    store: StateStore = Depends(get_store),
):
    """Add a player with a unique name."""
    if not player_data.name.strip():
        raise HTTPException(status_code=400, detail="Player name cannot be blank")

    state, applied = store.dispatch(AddPlayer(name=player_data.name))
    if not applied:
        raise HTTPException(
            status_code=400,
            detail=f"A player named '{player_data.name.strip()}' already exists"
        )
    return find_player_by_name(state, player_data.name)


@router.delete("/{player_id}", status_code=204)
async def delete_player(player_id: str, store: StateStore = Depends(get_store)):
    """Remove a player, cancelling their open matches and bets."""
    _, applied = store.dispatch(DeletePlayer(player_id=player_id))
    if not applied:
        raise HTTPException(status_code=404, detail="Player not found")


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard(limit: int | None = None, store: StateStore = Depends(get_store)):
    """Players ranked by ELO."""
    return [
        LeaderboardEntry(rank=i, player=player, win_rate=round(leaderboard.win_rate(player), 1))
        for i, player in enumerate(leaderboard.ranked_players(store.state, limit), start=1)
    ]


@router.get("/betting-leaderboard", response_model=List[Player])
async def get_betting_leaderboard(store: StateStore = Depends(get_store)):
    """Bettors ranked by total points earned."""
    return leaderboard.betting_leaderboard(store.state)
