"""Request bodies accepted by the API.

Counters are not range-checked: negative values are stored as sent.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class TeamIn(BaseModel):
    name: str = Field(min_length=1)


class PlayerIn(BaseModel):
    name: str = Field(min_length=1)
    number: int | None = None
    position: str | None = None


class PlayerUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    number: int | None = None
    position: str | None = None


class StatLineIn(BaseModel):
    # clients may echo back ids they received from GET /api/games/{id}
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    number: int | None = None
    player_id: int | None = None

    points: float = 0
    rebounds: float = 0
    assists: float = 0
    steals: float = 0
    blocks: float = 0
    minutes: float = 0
    seconds_played: float = 0


class GameIn(BaseModel):
    team_id: int
    opponent: str = Field(min_length=1)
    date: datetime.date
    players: list[StatLineIn] = []
    is_finished: bool = False


class GameUpdate(BaseModel):
    players: list[StatLineIn]
    is_finished: bool | None = None


class AnalyzeIn(BaseModel):
    team_id: int
    question: str = Field(min_length=1)
