from squad_stats.models.team import Team, RosterPlayer
from squad_stats.models.game import Game, GameStatLine, STAT_FIELDS

__all__ = ["Team", "RosterPlayer", "Game", "GameStatLine", "STAT_FIELDS"]
