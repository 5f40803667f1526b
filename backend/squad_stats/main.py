# Main FastAPI application
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from squad_stats.api import teams, games, stats, ai_routes
from squad_stats.core.config import settings
from squad_stats.db.session import init_models
import logging

# for logging in fastapi
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)


app = FastAPI(title="Squad Stats API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(teams.router, prefix="/api/teams", tags=["Teams"])
app.include_router(games.router, prefix="/api/games", tags=["Games"])
app.include_router(stats.router, prefix="/api/stats", tags=["Stats"])
app.include_router(ai_routes.router, prefix="/api/ai", tags=["AI Coach"])


@app.on_event("startup")
async def startup():
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_models()


@app.get("/")
def root():
    return {"message": "Squad Stats API running"}
