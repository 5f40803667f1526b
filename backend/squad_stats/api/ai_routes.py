# AI coach routes (Gemini)
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from squad_stats.core.errors import NotFoundError, UpstreamUnavailableError
from squad_stats.db.session import get_db
from squad_stats.db.teams import get_team, serialize_team
from squad_stats.db.games import list_team_games, serialize_game
from squad_stats.schemas import AnalyzeIn
from squad_stats.services.coach import build_coach_prompt
from squad_stats.services.gemini_client import GeminiClient
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

client = GeminiClient()

UNAVAILABLE_MESSAGE = "The AI Coach is currently unavailable."


# answer a coach's question from the team's season totals
@router.post("/analyze")
async def analyze(payload: AnalyzeIn, db: AsyncSession = Depends(get_db)):
    try:
        team = await get_team(db, payload.team_id)
        games = await list_team_games(db, payload.team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error loading team {payload.team_id} for AI coach: {e}")
        raise HTTPException(status_code=500, detail="Could not load team stats")

    prompt = build_coach_prompt(
        serialize_team(team), [serialize_game(g) for g in games], payload.question
    )

    try:
        reply = await client.generate(prompt)
    except UpstreamUnavailableError as e:
        logger.error(f"AI Error: {e}")
        raise HTTPException(status_code=503, detail=UNAVAILABLE_MESSAGE)
    except Exception as e:
        logger.error(f"AI Error: {e}")
        raise HTTPException(status_code=500, detail=UNAVAILABLE_MESSAGE)

    return {"reply": reply}
