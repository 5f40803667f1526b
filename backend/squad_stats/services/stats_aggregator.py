"""
Per-player aggregation over a team's box scores.

Both functions work on plain game dicts (the shape produced by
`squad_stats.db.games.serialize_game`) and never touch the database:

    {"id": 7, "team_id": 1, "opponent": "Lions", "date": date(2024, 3, 1),
     "players": [{"name": "Alex", "points": 20, ...}, ...]}
"""

from decimal import Decimal, ROUND_HALF_UP

from squad_stats.core.errors import NotFoundError
from squad_stats.models.game import STAT_FIELDS

ONE_DECIMAL = Decimal("0.1")


def _value(line: dict, field: str):
    # counters default to zero when absent
    return line.get(field) or 0


def format_average(total, games: int) -> str:
    """total / games rounded half-up to one decimal, e.g. 15.25 -> "15.3"."""
    average = Decimal(str(total)) / Decimal(games)
    return str(average.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


def find_stat_line(game: dict, player_name: str) -> dict | None:
    for line in game.get("players") or []:
        if line.get("name") == player_name:
            return line
    return None


def player_season_stats(team_id: int, player_name: str, games: list[dict]) -> dict:
    """
    Game log and per-game averages for one player of one team.

    Only games owned by `team_id` that contain a stat line named `player_name`
    count. History is ordered most recent first (ties keep input order).

    Raises NotFoundError when no game matches, rather than returning zeros.
    """
    game_logs = []
    for game in games:
        if game.get("team_id") != team_id:
            continue
        line = find_stat_line(game, player_name)
        if line is None:
            continue

        entry = {
            "game_id": game.get("id"),
            "opponent": game.get("opponent"),
            "date": game.get("date"),
        }
        for field in STAT_FIELDS:
            entry[field] = _value(line, field)
        game_logs.append(entry)

    if not game_logs:
        raise NotFoundError("Player stats", player_name)

    game_logs.sort(key=lambda entry: entry["date"], reverse=True)

    total_games = len(game_logs)
    totals = {
        field: sum(entry[field] for entry in game_logs) for field in STAT_FIELDS
    }
    averages = {
        field: format_average(totals[field], total_games) for field in STAT_FIELDS
    }

    return {
        "name": player_name,
        "total_games": total_games,
        "averages": averages,
        "history": game_logs,
    }


def team_player_totals(games: list[dict]) -> dict:
    """Raw season totals keyed by player name, with a games_played count."""
    totals = {}
    for game in games:
        for line in game.get("players") or []:
            name = line.get("name")
            if name not in totals:
                totals[name] = {"games_played": 0, **{f: 0 for f in STAT_FIELDS}}
            player_totals = totals[name]
            player_totals["games_played"] += 1
            for field in STAT_FIELDS:
                player_totals[field] += _value(line, field)
    return totals
