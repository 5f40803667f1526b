# Analytics routes
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from squad_stats.core.errors import NotFoundError
from squad_stats.db.session import get_db
from squad_stats.db.teams import get_team
from squad_stats.db.games import list_player_games, serialize_game
from squad_stats.services.stats_aggregator import player_season_stats
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


# player averages and game log, scoped to one team
@router.get("/{team_id}/player/{name}")
async def get_player_stats(
    team_id: int, name: str, db: AsyncSession = Depends(get_db)
):
    """
    Per-game averages (one decimal) and history for a player of a team.
    404 when the team does not exist or the player has no recorded games.
    """
    try:
        await get_team(db, team_id)
        games = await list_player_games(db, team_id, name)
        return player_season_stats(team_id, name, [serialize_game(g) for g in games])
    except NotFoundError as e:
        if e.resource == "Team":
            raise HTTPException(status_code=404, detail=str(e))
        raise HTTPException(
            status_code=404, detail="No games found for this player in this team."
        )
    except Exception as e:
        logger.error(f"Error computing stats for {name} (team {team_id}): {e}")
        raise HTTPException(status_code=500, detail="Server error")
