from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from league.core.actions import CancelMatch, CompleteMatch, CreateMatch, Rematch, StartMatch
from league.core.betting import betting_time_left, calculate_odds
from league.core.config import settings
from league.core.dependencies import get_store
from league.core.leaderboard import matches_with_status
from league.core.rating import win_probability
from league.core.store import StateStore
from league.models import Match, MatchStatus
from league.schemas.matches import (
    CompleteMatchRequest,
    CreateMatchRequest,
    CurrentMatchResponse,
    MatchPreviewResponse,
)

router = APIRouter(prefix="/matches", tags=["matches"])


def _get_match_or_404(store: StateStore, match_id: str) -> Match:
    match = store.state.find_match(match_id)
    if match is None:
        raise HTTPException(status_code=404, detail="Match not found")
    return match


@router.get("/", response_model=List[Match])
async def list_matches(status: Optional[MatchStatus] = None, store: StateStore = Depends(get_store)):
    """Matches in creation order, optionally filtered by status."""
    return matches_with_status(store.state, status)


@router.get("/current", response_model=CurrentMatchResponse)
async def get_current_match(store: StateStore = Depends(get_store)):
    """The match currently being played, with the betting time left."""
    match = store.state.current_match
    if match is None:
        return CurrentMatchResponse()
    return CurrentMatchResponse(
        match=match,
        betting_time_left=betting_time_left(match, window=settings.BETTING_WINDOW_SECONDS),
    )


@router.get("/preview", response_model=MatchPreviewResponse)
async def preview_match(player1_id: str, player2_id: str, store: StateStore = Depends(get_store)):
    """Win probabilities and betting odds for a possible pairing."""
    player1 = store.state.get_player(player1_id)
    player2 = store.state.get_player(player2_id)
    if player1 is None or player2 is None:
        raise HTTPException(status_code=404, detail="Player not found")

    probability = win_probability(player1.elo, player2.elo)
    return MatchPreviewResponse(
        player1_win_probability=probability,
        player2_win_probability=1 - probability,
        odds=calculate_odds(player1.elo, player2.elo),
    )


@router.post("/", response_model=Match, status_code=201)
async def create_match(match_data: CreateMatchRequest, store: StateStore = Depends(get_store)):
    """Queue a match between two players."""
    if match_data.player1_id == match_data.player2_id:
        raise HTTPException(status_code=400, detail="A player cannot play against themselves")

    for player_id in (match_data.player1_id, match_data.player2_id):
        if store.state.get_player(player_id) is None:
            raise HTTPException(status_code=404, detail=f"Player {player_id} not found")

    state, applied = store.dispatch(
        CreateMatch(player1_id=match_data.player1_id, player2_id=match_data.player2_id)
    )
    if not applied:
        raise HTTPException(status_code=400, detail="Match could not be created")
    return state.matches[-1]


@router.post("/{match_id}/start", response_model=Match)
async def start_match(match_id: str, store: StateStore = Depends(get_store)):
    """Start a pending match and make it the current one."""
    _get_match_or_404(store, match_id)
    state, applied = store.dispatch(StartMatch(match_id=match_id))
    if not applied:
        raise HTTPException(status_code=400, detail="Only pending matches can be started")
    return state.find_match(match_id)


@router.post("/{match_id}/complete", response_model=Match)
async def complete_match(
    match_id: str,
    result: CompleteMatchRequest,
    store: StateStore = Depends(get_store),
):
    """Record the winner, update ratings and settle bets."""
    match = _get_match_or_404(store, match_id)
    if not match.involves(result.winner_id):
        raise HTTPException(status_code=400, detail="Winner must be one of the match players")

    state, applied = store.dispatch(CompleteMatch(match_id=match_id, winner_id=result.winner_id))
    if not applied:
        raise HTTPException(status_code=400, detail="Only matches in progress can be completed")
    return state.find_match(match_id)


@router.post("/{match_id}/cancel", response_model=Match)
async def cancel_match(match_id: str, store: StateStore = Depends(get_store)):
    """Cancel a pending or live match."""
    _get_match_or_404(store, match_id)
    state, applied = store.dispatch(CancelMatch(match_id=match_id))
    if not applied:
        raise HTTPException(status_code=400, detail="Match is already finished")
    return state.find_match(match_id)


@router.post("/{match_id}/rematch", response_model=Match, status_code=201)
async def rematch(match_id: str, store: StateStore = Depends(get_store)):
    """Start a new match between the same two players."""
    _get_match_or_404(store, match_id)
    state, applied = store.dispatch(Rematch(match_id=match_id))
    if not applied:
        raise HTTPException(status_code=400, detail="Only completed matches can be replayed")
    return state.matches[-1]
