# teamforge/domain/team_formation.py
"""
Pure domain logic for diversity-maximizing team formation.

Members are partitioned into small teams so that each team covers as many
interest categories as possible. Construction is greedy (rarest-category seed,
then the member adding the most new categories), followed by a first-improvement
pairwise swap search across teams until no single swap raises the total score.

Functions included:
- plan_team_sizes
- select_seed
- jaccard_distance
- fill_team
- team_diversity_score
- total_diversity
- optimize_swaps
- compute_stats
- category_breakdown
- form_teams
- swap_members

All functions are pure: inputs are never mutated and fresh lists are returned.
"""
import logging
import math
from collections import Counter
from itertools import combinations
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from teamforge.domain.categories import CategoryIndex, default_category_index
from teamforge.domain.grouping import IdFactory, random_id, team_name
from teamforge.domain.models import (
    CategoryBreakdown,
    CategoryDetail,
    DiversityStats,
    Member,
    PartitioningResult,
    Team,
)

logger = logging.getLogger(__name__)

# below this many members no partitioning is attempted
MIN_MEMBERS_TO_PARTITION = 3

CategorySets = Dict[str, FrozenSet[str]]


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


# ----------------------------
# Size planning
# ----------------------------
def plan_team_sizes(n: int, preferred_size: int = 3) -> List[int]:
    """
    Team sizes for n members, spreading the remainder over the first teams.

    Example:
    >>> plan_team_sizes(10, 3)
    [4, 3, 3]
    >>> plan_team_sizes(2, 3)
    [2]
    """
    if preferred_size < 1:
        raise ValueError(f"preferred_size must be at least 1, got {preferred_size}")
    if n <= 0:
        return []
    if n < MIN_MEMBERS_TO_PARTITION:
        return [n]

    num_teams = max(1, _round_half_up(n / preferred_size))
    base_size = n // num_teams
    remainder = n - base_size * num_teams  # first 'remainder' teams get 1 more
    return [base_size + 1 if i < remainder else base_size for i in range(num_teams)]


# ----------------------------
# Greedy construction
# ----------------------------
def select_seed(pool: Sequence[Member], category_sets: CategorySets) -> Optional[int]:
    """
    Index in pool of the member carrying the rarest category.

    Rarity counts members of the pool covering a category. Score is
    min rarity * 100 - number of categories, lowest wins; members with no
    categories score +inf. Ties keep the earliest member.
    """
    if not pool:
        return None

    rarity = Counter()
    for m in pool:
        rarity.update(category_sets[m.id])

    def score(i: int) -> float:
        cats = category_sets[pool[i].id]
        if not cats:
            return math.inf
        return min(rarity[c] for c in cats) * 100 - len(cats)

    return min(range(len(pool)), key=score)


def jaccard_distance(a: FrozenSet[str], b: FrozenSet[str]) -> float:
    """1 - |a & b| / |a | b|, and 1 when both are empty."""
    union = a | b
    if not union:
        return 1.0
    return 1.0 - len(a & b) / len(union)


def fill_team(
    team: Sequence[Member],
    pool: Sequence[Member],
    size: int,
    category_sets: CategorySets,
) -> Tuple[List[Member], List[Member]]:
    """
    Add members from pool until team reaches size or pool runs out.
    Returns (team, remaining pool).
    """
    team = list(team)
    pool = list(pool)
    while len(team) < size and pool:
        team_cats = frozenset().union(*(category_sets[m.id] for m in team))

        def gain(i: int) -> Tuple[int, float]:
            cats = category_sets[pool[i].id]
            return len(cats - team_cats), jaccard_distance(team_cats, cats)

        # max() keeps the first of equal candidates
        best = max(range(len(pool)), key=gain)
        team.append(pool.pop(best))
    return team, pool


# ----------------------------
# Scoring
# ----------------------------
def team_diversity_score(team: Sequence[Member], category_sets: CategorySets) -> int:
    return len(frozenset().union(*(category_sets[m.id] for m in team)))


def total_diversity(teams: Sequence[Sequence[Member]], category_sets: CategorySets) -> int:
    return sum(team_diversity_score(t, category_sets) for t in teams)


# ----------------------------
# Swap improvement
# ----------------------------
def _first_improving_swap(
    teams: Tuple[Tuple[Member, ...], ...],
    category_sets: CategorySets,
) -> Optional[Tuple[Tuple[Member, ...], ...]]:
    scores = [team_diversity_score(t, category_sets) for t in teams]
    for ti, tj in combinations(range(len(teams)), 2):
        a, b = teams[ti], teams[tj]
        before = scores[ti] + scores[tj]
        for mi in range(len(a)):
            for mj in range(len(b)):
                new_a = a[:mi] + (b[mj],) + a[mi + 1:]
                new_b = b[:mj] + (a[mi],) + b[mj + 1:]
                after = team_diversity_score(new_a, category_sets) + team_diversity_score(new_b, category_sets)
                if after > before:
                    logger.debug("swap %s <-> %s (+%d)", a[mi].id, b[mj].id, after - before)
                    swapped = list(teams)
                    swapped[ti], swapped[tj] = new_a, new_b
                    return tuple(swapped)
    return None


def optimize_swaps(
    teams: Sequence[Sequence[Member]],
    category_sets: CategorySets,
    max_passes: Optional[int] = None,
) -> Tuple[List[List[Member]], int]:
    """
    First-improvement pairwise swap search to a local optimum.

    Each pass scans team pairs (i < j) and member pairs in order and accepts
    the first swap that strictly raises total diversity, then restarts. Stops
    after a pass with no accepted swap or after max_passes passes (default:
    members squared). Returns (teams, accepted swap count).
    """
    current = tuple(tuple(t) for t in teams)
    if max_passes is None:
        n = sum(len(t) for t in current)
        max_passes = n * n

    swaps = 0
    for _ in range(max_passes):
        candidate = _first_improving_swap(current, category_sets)
        if candidate is None:
            break
        current = candidate
        swaps += 1
    return [list(t) for t in current], swaps


# ----------------------------
# Reporting
# ----------------------------
def compute_stats(teams: Sequence[Sequence[Member]], index: CategoryIndex) -> DiversityStats:
    if not teams:
        return DiversityStats()

    category_sets = {m.id: index.categories_of(m) for t in teams for m in t}
    scores = [team_diversity_score(t, category_sets) for t in teams]
    total = sum(scores)
    max_possible = len(teams) * len(index)
    return DiversityStats(
        per_team_score=scores,
        total_score=total,
        max_possible_score=max_possible,
        average_score=_round_half_up(total / len(teams) * 10) / 10,
        coverage_percent=_round_half_up(total / max_possible * 100) if max_possible else 0,
    )


def category_breakdown(team: Team, index: Optional[CategoryIndex] = None) -> CategoryBreakdown:
    """
    Which categories a team covers, who covers each, and which are missing.

    Example:
    >>> t = Team(id="t", name="x", members=[Member(id="1", name="Ann", interests=["NLP"])])
    >>> category_breakdown(t).details[0].members
    ['Ann']
    """
    if index is None:
        index = default_category_index()
    found: Dict[str, List[str]] = {}
    for m in team.members:
        for tag in m.interests:
            cat = index.category_of(tag)
            if cat is None:
                continue
            names = found.setdefault(cat, [])
            if m.name not in names:
                names.append(m.name)

    return CategoryBreakdown(
        count=len(found),
        total=len(index),
        details=[
            CategoryDetail(category=cat, color=index.color_of(cat), members=names)
            for cat, names in found.items()
        ],
        missing=[name for name in index.names if name not in found],
    )


# ----------------------------
# Entry points
# ----------------------------
def _check_unique_ids(members: Sequence[Member]) -> None:
    seen = set()
    for m in members:
        if m.id in seen:
            raise ValueError(f"duplicate member id: {m.id}")
        seen.add(m.id)


def _build_teams(raw_teams: Sequence[Sequence[Member]], id_factory: IdFactory) -> List[Team]:
    return [
        Team(id=id_factory(), name=team_name(i), members=list(members))
        for i, members in enumerate(raw_teams)
    ]


def form_teams(
    members: Sequence[Member],
    preferred_size: int = 3,
    index: Optional[CategoryIndex] = None,
    id_factory: Optional[IdFactory] = None,
    max_passes: Optional[int] = None,
) -> PartitioningResult:
    """
    Partition members into teams maximizing category coverage.

    Fewer than three members yield a single team (none for an empty list).
    Member objects are carried through unchanged; team ids come from
    id_factory.
    """
    if index is None:
        index = default_category_index()
    id_factory = id_factory or random_id
    _check_unique_ids(members)
    sizes = plan_team_sizes(len(members), preferred_size)

    if len(members) < MIN_MEMBERS_TO_PARTITION:
        raw_teams = [list(members)] if members else []
        return PartitioningResult(teams=_build_teams(raw_teams, id_factory), stats=compute_stats(raw_teams, index))

    category_sets = {m.id: index.categories_of(m) for m in members}
    pool = list(members)
    raw_teams = []
    for size in sizes:
        seed = select_seed(pool, category_sets)
        team = [pool.pop(seed)] if seed is not None else []
        if team:
            logger.debug("seeded team %d with %s", len(raw_teams) + 1, team[0].id)
        team, pool = fill_team(team, pool, size, category_sets)
        if len(team) < size:
            logger.error("pool exhausted: team planned for %d has %d members", size, len(team))
        raw_teams.append(team)

    greedy_score = total_diversity(raw_teams, category_sets)
    raw_teams, swaps = optimize_swaps(raw_teams, category_sets, max_passes)
    logger.info(
        "%d members into %d teams: greedy score %d, %d swaps, final score %d",
        len(members), len(raw_teams), greedy_score, swaps, total_diversity(raw_teams, category_sets),
    )

    return PartitioningResult(teams=_build_teams(raw_teams, id_factory), stats=compute_stats(raw_teams, index))


def swap_members(
    teams: Sequence[Team],
    member_a_id: str,
    member_b_id: str,
    index: Optional[CategoryIndex] = None,
) -> PartitioningResult:
    """
    Manually swap two members by id and recompute stats.
    Team ids and names are kept. Unknown ids raise ValueError.
    """
    if index is None:
        index = default_category_index()
    positions = {}
    for ti, t in enumerate(teams):
        for mi, m in enumerate(t.members):
            if m.id in (member_a_id, member_b_id):
                positions[m.id] = (ti, mi)
    for member_id in (member_a_id, member_b_id):
        if member_id not in positions:
            raise ValueError(f"member not found in teams: {member_id}")

    rosters = [list(t.members) for t in teams]
    (ta, ma), (tb, mb) = positions[member_a_id], positions[member_b_id]
    rosters[ta][ma], rosters[tb][mb] = rosters[tb][mb], rosters[ta][ma]

    new_teams = [t.model_copy(update={"members": r}) for t, r in zip(teams, rosters)]
    return PartitioningResult(teams=new_teams, stats=compute_stats(rosters, index))
