import logging
from datetime import date
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from squad_stats.core.errors import NotFoundError
from squad_stats.models.game import Game, GameStatLine, STAT_FIELDS
from squad_stats.db.teams import get_team

logger = logging.getLogger(__name__)

LINE_FIELDS = ("name", "number", "player_id", *STAT_FIELDS, "seconds_played")


def serialize_stat_line(line: GameStatLine) -> dict:
    return {"id": line.id, **{field: getattr(line, field) for field in LINE_FIELDS}}


def serialize_game(game: Game) -> dict:
    return {
        "id": game.id,
        "team_id": game.team_id,
        "opponent": game.opponent,
        "date": game.game_date,
        "is_finished": game.is_finished,
        "players": [serialize_stat_line(line) for line in game.stat_lines],
    }


def build_stat_lines(players: list[dict], roster_ids: set[int]) -> list[GameStatLine]:
    lines = []
    for p in players:
        values = {field: p.get(field) for field in LINE_FIELDS}
        for field in (*STAT_FIELDS, "seconds_played"):
            if values[field] is None:
                values[field] = 0
        # only keep links to players on this team's roster
        if values["player_id"] not in roster_ids:
            values["player_id"] = None
        lines.append(GameStatLine(**values))
    return lines


async def get_game(db: AsyncSession, game_id: int) -> Game:
    game = await db.get(Game, game_id)
    if game is None:
        raise NotFoundError("Game", game_id)
    return game


async def create_game(
    db: AsyncSession,
    team_id: int,
    opponent: str,
    game_date: date,
    players: list[dict],
    is_finished: bool = False,
) -> Game:
    # the owning team has to exist
    team = await get_team(db, team_id)

    game = Game(
        team_id=team_id,
        opponent=opponent,
        game_date=game_date,
        is_finished=is_finished,
        stat_lines=build_stat_lines(players, {p.id for p in team.players}),
    )
    db.add(game)
    await db.commit()

    logger.info(f"Game vs {opponent} created with ID: {game.id}")
    return game


# Replace the whole box score (the tracker's "save" button)
async def update_game_stats(
    db: AsyncSession,
    game_id: int,
    players: list[dict],
    is_finished: bool | None = None,
) -> Game:
    game = await get_game(db, game_id)
    team = await get_team(db, game.team_id)
    game.stat_lines = build_stat_lines(players, {p.id for p in team.players})
    if is_finished is not None:
        game.is_finished = is_finished
    await db.commit()

    logger.info(f"Stats updated for game: {game.opponent}")
    return game


async def delete_game(db: AsyncSession, game_id: int):
    game = await get_game(db, game_id)
    await db.delete(game)
    await db.commit()
    logger.info(f"Deleted game {game_id}")


async def list_team_games(db: AsyncSession, team_id: int) -> list[Game]:
    """All games owned by a team, most recent first."""
    result = await db.execute(
        select(Game)
        .where(Game.team_id == team_id)
        .order_by(Game.game_date.desc(), Game.id)
    )
    return list(result.scalars().all())


async def list_player_games(
    db: AsyncSession, team_id: int, player_name: str
) -> list[Game]:
    """Games of a team whose box score has a line for `player_name`."""
    result = await db.execute(
        select(Game)
        .where(Game.team_id == team_id)
        .where(Game.stat_lines.any(GameStatLine.name == player_name))
        .order_by(Game.game_date.desc(), Game.id)
    )
    return list(result.scalars().all())
