import json
import textwrap

from squad_stats.services.stats_aggregator import team_player_totals

PROMPT_TEMPLATE = textwrap.dedent(
    """\
    You are an expert Basketball Assistant Coach.
    Here is the raw data for the team "{team_name}":
    Roster: {roster}

    Current Season Stats (JSON format):
    {stats}

    Based ONLY on this data, please answer this question from the head coach:
    "{question}"

    Keep the answer concise, professional, and highlight specific numbers to back up your claims.
    """
)


def build_coach_prompt(team: dict, games: list[dict], question: str) -> str:
    """Prompt for the AI coach: roster names plus per-player season totals."""
    roster = ", ".join(p["name"] for p in team.get("players", []))
    stats = json.dumps(team_player_totals(games), sort_keys=True)
    return PROMPT_TEMPLATE.format(
        team_name=team["name"],
        roster=roster or "(empty)",
        stats=stats,
        question=question,
    )
