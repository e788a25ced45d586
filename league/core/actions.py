"""
Actions accepted by the reducer.

Each action is tagged by its ``type`` so a list of actions can be parsed
straight from JSON with ``ActionAdapter.validate_python``.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BaseAction(BaseModel):
    model_config = ConfigDict(frozen=True)


class AddPlayer(BaseAction):
    type: Literal["ADD_PLAYER"] = "ADD_PLAYER"
    name: str


class DeletePlayer(BaseAction):
    type: Literal["DELETE_PLAYER"] = "DELETE_PLAYER"
    player_id: str


class CreateMatch(BaseAction):
    type: Literal["CREATE_MATCH"] = "CREATE_MATCH"
    player1_id: str
    player2_id: str


class StartMatch(BaseAction):
    type: Literal["START_MATCH"] = "START_MATCH"
    match_id: str


class CompleteMatch(BaseAction):
    type: Literal["COMPLETE_MATCH"] = "COMPLETE_MATCH"
    match_id: str
    winner_id: str


class CancelMatch(BaseAction):
    type: Literal["CANCEL_MATCH"] = "CANCEL_MATCH"
    match_id: str


class PlaceBet(BaseAction):
    type: Literal["PLACE_BET"] = "PLACE_BET"
    match_id: str
    bettor_id: str
    predicted_winner_id: str
    points: int


class Rematch(BaseAction):
    type: Literal["REMATCH"] = "REMATCH"
    match_id: str


class SetCurrentMatch(BaseAction):
    type: Literal["SET_CURRENT_MATCH"] = "SET_CURRENT_MATCH"
    match_id: Optional[str] = None


Action = Annotated[
    Union[
        AddPlayer,
        DeletePlayer,
        CreateMatch,
        StartMatch,
        CompleteMatch,
        CancelMatch,
        PlaceBet,
        SetCurrentMatch,
        Rematch,
    ],
    Field(discriminator="type"),
]

ActionAdapter = TypeAdapter(Action)
