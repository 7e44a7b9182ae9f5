# teamforge/simulation/simulate.py
"""
Simulation script: creates fake members with random interests, forms teams,
and prints each team's category coverage.

Uses the service directly (no HTTP calls).
"""

import logging
import random
from typing import List

from faker import Faker

from teamforge.domain.categories import default_category_index
from teamforge.domain.models import Member
from teamforge.services.team_service import TeamService

NUM_MEMBERS = 20
INTERESTS_PER_MEMBER = (1, 4)


def make_members(count: int = NUM_MEMBERS, seed: int = None) -> List[Member]:
    """Fake members, each with a few tags drawn from the category catalog."""
    fake = Faker()
    rng = random.Random(seed)
    if seed is not None:
        fake.seed_instance(seed)
    tags = [opt.tag for opt in default_category_index().all_interests()]

    members = []
    for i in range(count):
        k = rng.randint(*INTERESTS_PER_MEMBER)
        members.append(Member(
            id=f"m{i + 1}",
            name=fake.name(),
            email=fake.email(),
            interests=rng.sample(tags, k),
        ))
    return members


def run_simulation(count: int = NUM_MEMBERS, seed: int = None):
    service = TeamService()
    members = make_members(count, seed)
    result = service.form(members)

    for team, score in zip(result.teams, result.stats.per_team_score):
        breakdown = service.breakdown(team)
        print(f"{team.name} [{score}/{breakdown.total}] " + ", ".join(m.name for m in team.members))
        if breakdown.missing:
            print(f"   missing: {', '.join(breakdown.missing)}")

    s = result.stats
    print(f"Total diversity {s.total_score}/{s.max_possible_score} "
          f"(avg {s.average_score}, coverage {s.coverage_percent}%)")
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_simulation()
