from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from league.core.actions import PlaceBet
from league.core.betting import pool_totals
from league.core.dependencies import get_store
from league.core.store import StateStore
from league.models import Bet, MatchStatus
from league.schemas.bets import PlaceBetRequest, PoolTotalsResponse

router = APIRouter(prefix="/bets", tags=["bets"])


@router.get("/", response_model=List[Bet])
async def list_bets(
    match_id: Optional[str] = Query(None, description="Only bets on this match"),
    store: StateStore = Depends(get_store),
):
    """List bets, optionally for a single match."""
    if match_id is None:
        return store.state.bets
    return store.state.bets_for_match(match_id)


@router.post("/", response_model=Bet, status_code=201)
async def place_bet(bet_data: PlaceBetRequest, store: StateStore = Depends(get_store)):
    """Stake betting points on a live match."""
    match = store.state.find_match(bet_data.match_id)
    if match is None:
        raise HTTPException(status_code=404, detail="Match not found")
    if match.status is not MatchStatus.IN_PROGRESS:
        raise HTTPException(status_code=400, detail="Betting is only open on live matches")

    bettor = store.state.get_player(bet_data.bettor_id)
    if bettor is None:
        raise HTTPException(status_code=404, detail="Bettor not found")
    if bet_data.points > bettor.betting_pool:
        raise HTTPException(
            status_code=400,
            detail=f"Insufficient funds. You have {bettor.betting_pool} points available."
        )

    state, applied = store.dispatch(
        PlaceBet(
            match_id=bet_data.match_id,
            bettor_id=bet_data.bettor_id,
            predicted_winner_id=bet_data.predicted_winner_id,
            points=bet_data.points,
        )
    )
    if not applied:
        raise HTTPException(status_code=400, detail="Bet was rejected")
    return state.bets[-1]


@router.get("/pools/{match_id}", response_model=PoolTotalsResponse)
async def get_pool_totals(match_id: str, store: StateStore = Depends(get_store)):
    """Points staked on each player of a match."""
    if store.state.find_match(match_id) is None:
        raise HTTPException(status_code=404, detail="Match not found")
    return PoolTotalsResponse(match_id=match_id, totals=pool_totals(store.state, match_id))
