"""
Clinch and elimination scenario generation.

Turns magic numbers into short sentences a dashboard can show next to each
team. Only deterministic outcomes are described: an elimination line means no
combination of results gets the team into the playoffs.
"""

from typing import Dict, List, Tuple

from .models import MagicNumbers, TeamId


def _win_phrase(needed: int, games_left: int) -> str:
    if needed == games_left == 1:
        return "Win your final game"
    if needed == games_left:
        return f"Win all remaining {games_left} games"
    return f"Win {needed} of {games_left} remaining games"


def clinch_scenarios(magic: MagicNumbers, games_left: int) -> List[str]:
    """Ways a team can guarantee a playoff spot or the #1 seed."""
    scenarios = []

    if magic.clinched_playoffs:
        scenarios.append("Clinched a playoff spot")
    elif magic.magic_playoffs is not None:
        scenarios.append(f"{_win_phrase(magic.magic_playoffs, games_left)} to clinch a playoff spot")

    if magic.clinched_first_seed:
        scenarios.append("Clinched the #1 seed")
    elif magic.magic_first_seed is not None:
        scenarios.append(f"{_win_phrase(magic.magic_first_seed, games_left)} to clinch the #1 seed")

    return scenarios


def elimination_scenarios(magic: MagicNumbers, games_left: int) -> List[str]:
    """Explanation for a team that can no longer reach the playoffs."""
    if not magic.eliminated:
        return []

    if games_left == 0:
        return ["Eliminated from playoff contention"]
    if games_left == 1:
        return ["Eliminated from playoff contention: even a win in the final game cannot reach a playoff spot"]
    return [
        f"Eliminated from playoff contention: even winning all remaining {games_left} games "
        f"cannot reach a playoff spot"
    ]


def generate_clinch_elimination_scenarios(
    magic_numbers: Dict[TeamId, MagicNumbers],
    games_remaining: Dict[TeamId, int]
) -> Dict[TeamId, Tuple[List[str], List[str]]]:
    """
    Generate clinch and elimination scenarios for every team.

    Args:
        magic_numbers: Pre-calculated magic numbers
        games_remaining: Remaining game count per team

    Returns:
        Dict mapping team_id -> (clinch_scenarios, elimination_scenarios)
    """
    return {
        team_id: (
            clinch_scenarios(magic, games_remaining.get(team_id, 0)),
            elimination_scenarios(magic, games_remaining.get(team_id, 0)),
        )
        for team_id, magic in magic_numbers.items()
    }
