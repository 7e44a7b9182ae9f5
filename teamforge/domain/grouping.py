# teamforge/domain/grouping.py

import itertools
import random
import string
from typing import Callable, Iterator, Optional
from dataclasses import dataclass

# an id factory returns a fresh opaque string on every call
IdFactory = Callable[[], str]

TEAM_NAMES = [
    "Alpha", "Nova", "Helix", "Prism", "Vertex", "Cipher", "Flux",
    "Nexus", "Orbit", "Pulse", "Quark", "Spark", "Tensor", "Vector",
    "Zenith", "Arc", "Bolt", "Core", "Delta", "Echo",
]

_ALPHABET = string.ascii_lowercase + string.digits


def random_id(length: int = 8, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.SystemRandom()
    return "".join(rng.choice(_ALPHABET) for _ in range(length))


def sequential_ids(prefix: str = "team-") -> IdFactory:
    """
    Deterministic id factory for tests and simulations.

    >>> next_id = sequential_ids()
    >>> next_id(), next_id()
    ('team-1', 'team-2')
    """
    counter: Iterator[int] = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


def team_name(index: int) -> str:
    return f"△ {TEAM_NAMES[index % len(TEAM_NAMES)]}"


@dataclass
class FormationOptions:
    preferred_size: int = 3
    max_passes: Optional[int] = None
    id_factory: IdFactory = random_id
