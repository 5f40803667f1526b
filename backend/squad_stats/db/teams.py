import logging
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from squad_stats.core.errors import NotFoundError
from squad_stats.models.team import Team, RosterPlayer
from squad_stats.models.game import Game, GameStatLine

logger = logging.getLogger(__name__)


def serialize_player(player: RosterPlayer) -> dict:
    return {
        "id": player.id,
        "name": player.name,
        "number": player.number,
        "position": player.position,
    }


def serialize_team(team: Team) -> dict:
    return {
        "id": team.id,
        "name": team.name,
        "created_at": team.created_at,
        "players": [serialize_player(p) for p in team.players],
    }


async def get_team(db: AsyncSession, team_id: int) -> Team:
    team = await db.get(Team, team_id)
    if team is None:
        raise NotFoundError("Team", team_id)
    return team


async def list_teams(db: AsyncSession) -> list[Team]:
    result = await db.execute(select(Team).order_by(Team.created_at, Team.id))
    return list(result.scalars().all())


async def create_team(db: AsyncSession, name: str) -> Team:
    team = Team(name=name, players=[])
    db.add(team)
    await db.commit()
    return team


async def rename_team(db: AsyncSession, team_id: int, name: str) -> Team:
    team = await get_team(db, team_id)
    team.name = name
    await db.commit()
    return team


# Deletes the team and every game it owns. Both deletes share the session
# transaction so a failure before commit leaves the store untouched.
async def delete_team(db: AsyncSession, team_id: int) -> int:
    team = await get_team(db, team_id)

    result = await db.execute(select(Game).where(Game.team_id == team_id))
    games = result.scalars().all()
    for game in games:
        await db.delete(game)
    await db.flush()

    await db.delete(team)
    await db.commit()

    logger.info(f"Deleted team {team_id} and {len(games)} games")
    return len(games)


# Roster


async def add_player(
    db: AsyncSession,
    team_id: int,
    name: str,
    number: int | None = None,
    position: str | None = None,
) -> Team:
    team = await get_team(db, team_id)
    team.players.append(RosterPlayer(name=name, number=number, position=position))
    await db.commit()
    return team


def _find_player(team: Team, player_id: int) -> RosterPlayer:
    for player in team.players:
        if player.id == player_id:
            return player
    raise NotFoundError("Player", player_id)


async def update_player(
    db: AsyncSession, team_id: int, player_id: int, changes: dict
) -> Team:
    team = await get_team(db, team_id)
    player = _find_player(team, player_id)
    for key in ("name", "number", "position"):
        if key not in changes:
            continue
        # name is required on a roster entry, a null means "leave as is"
        if key == "name" and changes[key] is None:
            continue
        setattr(player, key, changes[key])
    await db.commit()
    return team


async def remove_player(db: AsyncSession, team_id: int, player_id: int) -> Team:
    team = await get_team(db, team_id)
    player = _find_player(team, player_id)
    team.players.remove(player)
    # past box scores keep the name snapshot but lose the roster link
    await db.execute(
        update(GameStatLine)
        .where(GameStatLine.player_id == player_id)
        .values(player_id=None)
    )
    await db.commit()
    return team
