# Game (box score) routes
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from squad_stats.core.errors import NotFoundError
from squad_stats.db.session import get_db
from squad_stats.db import games as game_store
from squad_stats.db.games import serialize_game
from squad_stats.schemas import GameIn, GameUpdate
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def create_game(payload: GameIn, db: AsyncSession = Depends(get_db)):
    try:
        game = await game_store.create_game(
            db,
            team_id=payload.team_id,
            opponent=payload.opponent,
            game_date=payload.date,
            players=[p.model_dump() for p in payload.players],
            is_finished=payload.is_finished,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating game vs {payload.opponent}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Failed to create game")
    return {"success": True, "game_id": game.id}


# game history for a team, most recent first
@router.get("/team/{team_id}")
async def list_team_games(team_id: int, db: AsyncSession = Depends(get_db)):
    try:
        games = await game_store.list_team_games(db, team_id)
    except Exception as e:
        logger.error(f"Error fetching games for team {team_id}: {e}")
        raise HTTPException(status_code=500, detail="Could not fetch history")
    return [serialize_game(g) for g in games]


# game data for the tracker
@router.get("/{game_id}")
async def get_game(game_id: int, db: AsyncSession = Depends(get_db)):
    try:
        game = await game_store.get_game(db, game_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_game(game)


# replace the box score (the tracker's "save" button)
@router.put("/{game_id}")
async def update_game(
    game_id: int, payload: GameUpdate, db: AsyncSession = Depends(get_db)
):
    try:
        game = await game_store.update_game_stats(
            db,
            game_id,
            players=[p.model_dump() for p in payload.players],
            is_finished=payload.is_finished,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error saving stats for game {game_id}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Failed to save stats")
    return {"success": True, "game": serialize_game(game)}


@router.delete("/{game_id}")
async def delete_game(game_id: int, db: AsyncSession = Depends(get_db)):
    try:
        await game_store.delete_game(db, game_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting game {game_id}: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail="Could not delete game")
    return {"success": True}
