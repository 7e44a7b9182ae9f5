import logging
from typing import List, Optional, Sequence

from teamforge.config.settings import settings
from teamforge.domain.categories import CategoryIndex, default_category_index
from teamforge.domain.grouping import FormationOptions
from teamforge.domain.models import CategoryBreakdown, InterestOption, Member, PartitioningResult, Team
from teamforge.domain.team_formation import category_breakdown, form_teams, swap_members

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, index: CategoryIndex = None, options: FormationOptions = None):
        self.index = index if index is not None else default_category_index()
        self.options = options or FormationOptions(
            preferred_size=settings.TEAM_SIZE_DEFAULT,
            max_passes=settings.SWAP_MAX_PASSES,
        )

    def form(self, members: Sequence[Member], preferred_size: Optional[int] = None) -> PartitioningResult:
        size = preferred_size if preferred_size is not None else self.options.preferred_size
        result = form_teams(
            members,
            preferred_size=size,
            index=self.index,
            id_factory=self.options.id_factory,
            max_passes=self.options.max_passes,
        )
        logger.info(
            "Formed %d teams from %d members (diversity %d/%d, %d%%)",
            len(result.teams),
            len(members),
            result.stats.total_score,
            result.stats.max_possible_score,
            result.stats.coverage_percent,
        )
        return result

    def regenerate(self, members: Sequence[Member], preferred_size: Optional[int] = None) -> PartitioningResult:
        # previous result is discarded by the caller; formation is stateless
        return self.form(members, preferred_size)

    def breakdown(self, team: Team) -> CategoryBreakdown:
        return category_breakdown(team, self.index)

    def swap(self, teams: Sequence[Team], member_a_id: str, member_b_id: str) -> PartitioningResult:
        result = swap_members(teams, member_a_id, member_b_id, self.index)
        logger.info("Swapped %s and %s (diversity %d)", member_a_id, member_b_id, result.stats.total_score)
        return result

    def interests(self) -> List[InterestOption]:
        return self.index.all_interests()
