"""Two-team balancing engine built on category pairing and goalkeeper allocation."""

from __future__ import annotations

import logging
import math
import random
from statistics import fmean, pvariance
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from teambalancer.config.options import (
    DEFAULT_TEAM_A_NAME,
    DEFAULT_TEAM_B_NAME,
    TeamGenerationOptions,
)
from teambalancer.models import DEFENDER, FORWARD, HYBRID, PlayerRecord, Team, TeamBalanceResult


logger = logging.getLogger(__name__)

NO_ACTIVE_PLAYERS_WARNING = "No active players available"

ROLE_DEFENDER = "defender"
ROLE_ATTACKER = "attacker"

STANDARD_CATEGORIES = (1, 2, 3)

_DEFENDER_SHARE = 0.4
_SUGGESTION_GAP_RATIO = 0.2


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _new_teams(team_a_name: str, team_b_name: str) -> List[Team]:
    return [
        Team(team_id="team-A", name=team_a_name),
        Team(team_id="team-B", name=team_b_name),
    ]


def partition_by_category(players: Iterable[PlayerRecord]) -> Dict[int, List[PlayerRecord]]:
    """Bucket field players by the categories present, strongest tier first."""

    grouped: Dict[int, List[PlayerRecord]] = {}
    for player in players:
        if player.is_goalkeeper:
            continue
        grouped.setdefault(player.category, []).append(player)
    return {category: grouped[category] for category in sorted(grouped)}


def best_player(players: Sequence[PlayerRecord], rng: random.Random) -> Optional[PlayerRecord]:
    """Lowest-multiplier player, picking at random among exact ties."""

    if not players:
        return None
    lowest = min(player.multiplier for player in players)
    candidates = [player for player in players if player.multiplier == lowest]
    if len(candidates) > 1:
        return rng.choice(candidates)
    return candidates[0]


def assign_pair(
    teams: Sequence[Team],
    first: PlayerRecord,
    second: PlayerRecord,
    *,
    role: Optional[str] = None,
) -> Tuple[Team, Team]:
    """Give the stronger player of a pair to the currently weaker team.

    Returns ``(team that got the better player, team that got the worse one)``.
    Equal averages favour team A.
    """

    if first.multiplier < second.multiplier:
        better, worse = first, second
    else:
        better, worse = second, first

    team_a, team_b = teams
    avg_a = team_a.average_multiplier()
    avg_b = team_b.average_multiplier()
    if avg_a >= avg_b:
        weaker, stronger = team_a, team_b
    else:
        weaker, stronger = team_b, team_a

    weaker.add_field_player(better, role)
    stronger.add_field_player(worse, role)
    logger.debug(
        "Pair %s (%.2f) -> %s, %s (%.2f) -> %s [avg %.2f vs %.2f]",
        better.name,
        better.multiplier,
        weaker.name,
        worse.name,
        worse.multiplier,
        stronger.name,
        avg_a,
        avg_b,
    )
    return weaker, stronger


def process_category(
    teams: Sequence[Team],
    current: Sequence[PlayerRecord],
    next_bucket: Sequence[PlayerRecord],
    category: int,
    rng: random.Random,
    *,
    role: Optional[str] = None,
) -> List[PlayerRecord]:
    """Pair off one category and return what is left of the next-weaker bucket."""

    remaining_next = list(next_bucket)
    if not current:
        return remaining_next

    queue = list(current)
    rng.shuffle(queue)

    even_count = len(queue) - len(queue) % 2
    for index in range(0, even_count, 2):
        assign_pair(teams, queue[index], queue[index + 1], role=role)

    if len(queue) % 2:
        odd = queue[-1]
        borrowed = best_player(remaining_next, rng)
        if borrowed is not None:
            remaining_next.remove(borrowed)
            logger.debug(
                "Category %d: borrowed %s from category %d to pair with %s",
                category,
                borrowed.name,
                category + 1,
                odd.name,
            )
            assign_pair(teams, odd, borrowed, role=role)
        else:
            target = rng.choice(list(teams))
            target.add_field_player(odd, role)
            logger.debug("Category %d: leftover %s -> %s (random)", category, odd.name, target.name)

    return remaining_next


def distribute_by_category(
    teams: Sequence[Team],
    field_players: Sequence[PlayerRecord],
    rng: random.Random,
    warnings: List[str],
    *,
    role: Optional[str] = None,
) -> None:
    """Run the pairwise distributor over every tier, strongest first."""

    buckets = partition_by_category(field_players)
    if not buckets:
        return

    nonstandard = sorted(
        category for category, bucket in buckets.items() if bucket and category not in STANDARD_CATEGORIES
    )
    if nonstandard:
        listed = ", ".join(str(category) for category in nonstandard)
        warnings.append(f"Players with categories outside 1-3 found ({listed}); tiers ordered by category value")

    logger.info(
        "Category distribution: %s",
        {category: len(bucket) for category, bucket in buckets.items()},
    )

    # only the directly weaker tier lends a player; a missing tier means no borrow
    for category in list(buckets):
        next_category = category + 1
        has_next = next_category in buckets
        next_bucket = buckets[next_category] if has_next else []
        remaining = process_category(teams, buckets[category], next_bucket, category, rng, role=role)
        if has_next:
            buckets[next_category] = remaining


def distribute_goalkeepers(
    teams: Sequence[Team],
    goalkeepers: Sequence[PlayerRecord],
    warnings: List[str],
) -> None:
    """Hand goalkeepers out best-first, each to the currently weaker team."""

    if not goalkeepers:
        return

    team_a, team_b = teams
    for goalkeeper in sorted(goalkeepers, key=lambda player: player.multiplier):
        avg_a = team_a.average_multiplier()
        avg_b = team_b.average_multiplier()
        target = team_a if avg_a >= avg_b else team_b
        target.add_goalkeeper(goalkeeper)
        logger.debug(
            "Goalkeeper %s (%.2f) -> %s [avg %.2f vs %.2f]",
            goalkeeper.name,
            goalkeeper.multiplier,
            target.name,
            avg_a,
            avg_b,
        )

    if len(goalkeepers) > 2:
        warnings.append(f"{len(goalkeepers)} goalkeepers found, only 2 teams available")


def _distribute_defenders(
    teams: Sequence[Team],
    defenders: Sequence[PlayerRecord],
    hybrids: Sequence[PlayerRecord],
    defenders_per_team: int,
    rng: random.Random,
    warnings: List[str],
) -> Set[str]:
    used_hybrids: Set[str] = set()
    ordered = sorted(defenders, key=lambda player: player.multiplier, reverse=True)
    needed = defenders_per_team * 2

    if len(ordered) < needed and hybrids:
        count = min(needed - len(ordered), len(hybrids))
        fillers = sorted(hybrids, key=lambda player: player.multiplier, reverse=True)[:count]
        used_hybrids.update(player.player_id for player in fillers)
        ordered = sorted([*ordered, *fillers], key=lambda player: player.multiplier, reverse=True)
        warnings.append(
            f"Using {count} {HYBRID} players as defenders (total {len(ordered)} defenders)"
        )

    # the two weakest defenders always split across the teams
    for team, player in zip(teams, ordered[:2]):
        team.add_field_player(player, ROLE_DEFENDER)

    remaining = ordered[2:]
    rng.shuffle(remaining)

    team_a, team_b = teams
    for index in range(0, len(remaining), 2):
        first = remaining[index]
        second = remaining[index + 1] if index + 1 < len(remaining) else None
        if team_a.multiplier_sum() > team_b.multiplier_sum():
            weaker, stronger = team_a, team_b
        else:
            weaker, stronger = team_b, team_a

        if second is None:
            weaker.add_field_player(first, ROLE_DEFENDER)
            continue

        if first.multiplier < second.multiplier:
            better, worse = first, second
        else:
            better, worse = second, first
        weaker.add_field_player(better, ROLE_DEFENDER)
        stronger.add_field_player(worse, ROLE_DEFENDER)

    return used_hybrids


def distribute_by_position(
    teams: Sequence[Team],
    field_players: Sequence[PlayerRecord],
    rng: random.Random,
    warnings: List[str],
) -> None:
    """Balance defenders first, then run the category distributor over attackers."""

    defenders = [player for player in field_players if player.position == DEFENDER]
    hybrids = [player for player in field_players if player.position == HYBRID]
    forwards = [player for player in field_players if player.position == FORWARD]

    total_needed = _round_half_up(len(field_players) * _DEFENDER_SHARE)
    per_team = math.ceil(total_needed / 2)
    logger.info(
        "Position distribution: %d defenders, %d hybrids, %d forwards; %d defenders per team",
        len(defenders),
        len(hybrids),
        len(forwards),
        per_team,
    )

    used_hybrids = _distribute_defenders(teams, defenders, hybrids, per_team, rng, warnings)
    attackers = forwards + [player for player in hybrids if player.player_id not in used_hybrids]
    distribute_by_category(teams, attackers, rng, warnings, role=ROLE_ATTACKER)


def calculate_balance_score(teams: Sequence[Team]) -> int:
    """Score 0-100 from the variance of team point totals; 100 is identical totals."""

    if len(teams) < 2:
        return 0
    totals = [team.total_points for team in teams]
    mean = fmean(totals)
    if mean == 0:
        return 0
    variance = pvariance(totals, mu=mean)
    max_variance = mean**2
    score = max(0.0, 100 - (variance / max_variance) * 100)
    return _round_half_up(score)


def suggest_team_improvements(teams: Sequence[Team]) -> List[str]:
    suggestions: List[str] = []
    if not teams:
        return suggestions

    totals = [team.total_points for team in teams]
    average = fmean(totals)
    if max(totals) - min(totals) > average * _SUGGESTION_GAP_RATIO:
        suggestions.append("Consider swapping players between teams to reduce skill gap")

    goalkeeper_counts = [len(team.goalkeepers) for team in teams]
    if max(goalkeeper_counts) - min(goalkeeper_counts) > 1:
        suggestions.append("Goalkeeper distribution is uneven across teams")

    return suggestions


def _option_warnings(teams: Sequence[Team], options: TeamGenerationOptions) -> List[str]:
    if options.allow_partial_teams:
        return []
    warnings: List[str] = []
    for team in teams:
        if options.players_per_team is not None and len(team.players) < options.players_per_team:
            warnings.append(
                f"{team.name} has {len(team.players)} players, {options.players_per_team} requested"
            )
        if len(team.goalkeepers) < options.goalkeepers_per_team:
            warnings.append(
                f"{team.name} has {len(team.goalkeepers)} goalkeepers, "
                f"{options.goalkeepers_per_team} requested"
            )
    return warnings


def generate_balanced_teams(
    players: Iterable[PlayerRecord],
    options: Optional[TeamGenerationOptions] = None,
    team_a_name: str = DEFAULT_TEAM_A_NAME,
    team_b_name: str = DEFAULT_TEAM_B_NAME,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> TeamBalanceResult:
    """Split the active players into two balanced teams.

    Pass ``rng`` (or ``seed``) for reproducible shuffles and tie-breaks; the
    engine keeps no state between calls.
    """

    options = options or TeamGenerationOptions()
    if rng is None:
        rng = random.Random(seed)

    teams = _new_teams(team_a_name, team_b_name)
    active = [player for player in players if player.is_active]
    if not active:
        logger.info("No active players supplied; returning empty teams")
        return TeamBalanceResult(teams=teams, balance_score=0, warnings=[NO_ACTIVE_PLAYERS_WARNING])

    goalkeepers = [player for player in active if player.is_goalkeeper]
    field_players = [player for player in active if not player.is_goalkeeper]
    warnings: List[str] = []

    logger.info(
        "Balancing %d players (%d field, %d goalkeepers) with %s distribution, balance method %s",
        len(active),
        len(field_players),
        len(goalkeepers),
        options.distribution_method,
        options.balance_method,
    )

    if options.distribution_method == "position":
        distribute_by_position(teams, field_players, rng, warnings)
    else:
        distribute_by_category(teams, field_players, rng, warnings)
    distribute_goalkeepers(teams, goalkeepers, warnings)

    for team in teams:
        team.recompute_total_points()
    balance_score = calculate_balance_score(teams)

    assigned_ids = {player_id for team in teams for player_id in team.members}
    unused_players = [player for player in active if player.player_id not in assigned_ids]
    if unused_players:
        logger.warning(
            "%d active players were not assigned: %s",
            len(unused_players),
            ", ".join(player.player_id for player in unused_players),
        )

    warnings.extend(_option_warnings(teams, options))
    suggestions = suggest_team_improvements(teams)

    logger.info(
        "Balance score %d (%s %.1f pts, %s %.1f pts)",
        balance_score,
        teams[0].name,
        teams[0].total_points,
        teams[1].name,
        teams[1].total_points,
    )
    return TeamBalanceResult(
        teams=teams,
        balance_score=balance_score,
        unused_players=unused_players,
        warnings=warnings,
        suggestions=suggestions,
    )
