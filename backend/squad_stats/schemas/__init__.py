from squad_stats.schemas.requests import (
    TeamIn,
    PlayerIn,
    PlayerUpdate,
    StatLineIn,
    GameIn,
    GameUpdate,
    AnalyzeIn,
)

__all__ = [
    "TeamIn",
    "PlayerIn",
    "PlayerUpdate",
    "StatLineIn",
    "GameIn",
    "GameUpdate",
    "AnalyzeIn",
]
