"""
Pytest configuration for squad-stats tests.

API tests run the real app against a throwaway SQLite file (aiosqlite) and
never reach Postgres or the Gemini API.
"""

import asyncio
import os
import tempfile
from datetime import date
from pathlib import Path

import pytest

# must be set before squad_stats.core.config is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="squad_stats_tests_"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'app.db'}"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["GEMINI_API_KEY"] = "test-key"


@pytest.fixture
def client(tmp_path):
    """TestClient whose requests use a fresh database per test."""
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
    from sqlalchemy.pool import NullPool
    from starlette.testclient import TestClient

    from squad_stats.db.session import get_db, init_models
    from squad_stats.main import app

    # NullPool: every session opens its own connection, so nothing is tied
    # to the event loop that created the tables
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )
    asyncio.run(init_models(engine))
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


def make_game(game_id, opponent, game_date, players, team_id=1):
    """Game dict in the shape the aggregator consumes."""
    return {
        "id": game_id,
        "team_id": team_id,
        "opponent": opponent,
        "date": game_date,
        "is_finished": True,
        "players": players,
    }


def make_line(name, **stats):
    line = {
        "name": name,
        "number": stats.pop("number", None),
        "points": 0,
        "rebounds": 0,
        "assists": 0,
        "steals": 0,
        "blocks": 0,
        "minutes": 0,
    }
    line.update(stats)
    return line


@pytest.fixture
def season_games():
    """Three games for team 1 and one for team 2, deliberately out of date order."""
    return [
        make_game(
            1,
            "Lions",
            date(2024, 1, 10),
            [
                make_line("Alex", points=20, rebounds=5, assists=3, minutes=30),
                make_line("Sam", points=8, rebounds=10, blocks=2, minutes=25),
            ],
        ),
        make_game(
            2,
            "Bears",
            date(2024, 2, 1),
            [make_line("Alex", points=10, rebounds=4, assists=6, steals=1, minutes=28)],
        ),
        make_game(
            3,
            "Wolves",
            date(2024, 1, 20),
            [make_line("Sam", points=12, rebounds=7, minutes=22)],
        ),
        make_game(
            4,
            "Hawks",
            date(2024, 3, 1),
            [make_line("Alex", points=40, minutes=40)],
            team_id=2,
        ),
    ]
