# Team and roster management routes
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from squad_stats.core.errors import NotFoundError
from squad_stats.db.session import get_db
from squad_stats.db import teams as team_store
from squad_stats.db.teams import serialize_team
from squad_stats.schemas import TeamIn, PlayerIn, PlayerUpdate
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


# create a new team with an empty roster
@router.post("")
async def create_team(payload: TeamIn, db: AsyncSession = Depends(get_db)):
    try:
        team = await team_store.create_team(db, payload.name)
    except Exception as e:
        logger.error(f"Error creating team {payload.name}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Could not create team")
    return serialize_team(team)


# all teams (for the selection screen)
@router.get("")
async def list_teams(db: AsyncSession = Depends(get_db)):
    try:
        teams = await team_store.list_teams(db)
    except Exception as e:
        logger.error(f"Error fetching teams: {e}")
        raise HTTPException(status_code=500, detail="Could not fetch teams")
    return [serialize_team(t) for t in teams]


# one team with its roster
@router.get("/{team_id}")
async def get_team(team_id: int, db: AsyncSession = Depends(get_db)):
    try:
        team = await team_store.get_team(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_team(team)


@router.put("/{team_id}")
async def rename_team(
    team_id: int, payload: TeamIn, db: AsyncSession = Depends(get_db)
):
    try:
        team = await team_store.rename_team(db, team_id, payload.name)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error renaming team {team_id}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Could not update team")
    return serialize_team(team)


# delete the team and all of its games
@router.delete("/{team_id}")
async def delete_team(team_id: int, db: AsyncSession = Depends(get_db)):
    try:
        deleted_games = await team_store.delete_team(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting team {team_id}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Could not delete team")
    return {
        "success": True,
        "message": "Team and history deleted",
        "games_deleted": deleted_games,
    }


## Roster routes
@router.post("/{team_id}/players")
async def add_player(
    team_id: int, payload: PlayerIn, db: AsyncSession = Depends(get_db)
):
    try:
        team = await team_store.add_player(
            db, team_id, payload.name, payload.number, payload.position
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error adding player to team {team_id}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Could not add player")
    return serialize_team(team)


# edit name / number / position of a roster entry
@router.put("/{team_id}/players/{player_id}")
async def update_player(
    team_id: int,
    player_id: int,
    payload: PlayerUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        team = await team_store.update_player(
            db, team_id, player_id, payload.model_dump(exclude_unset=True)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating player {player_id}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Could not update player")
    return serialize_team(team)


@router.delete("/{team_id}/players/{player_id}")
async def remove_player(
    team_id: int, player_id: int, db: AsyncSession = Depends(get_db)
):
    try:
        team = await team_store.remove_player(db, team_id, player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting player {player_id}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Could not delete player")
    return serialize_team(team)
