# teamforge/api/routers/teams.py
"""
Team formation endpoints: form teams, category breakdown, manual swap, interest catalog.
Every call is a pure computation; nothing is stored.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from teamforge.domain.models import CategoryBreakdown, InterestOption, Member, PartitioningResult, Team
from teamforge.services.team_service import TeamService


router = APIRouter()
service = TeamService()


class FormTeamsReq(BaseModel):
    members: List[Member] = Field(default_factory=list)
    preferred_size: Optional[int] = Field(default=None, ge=1)


class SwapReq(BaseModel):
    teams: List[Team]
    member_a_id: str
    member_b_id: str


@router.post("/form", response_model=PartitioningResult, summary="Form diversity-maximizing teams")
def form(req: FormTeamsReq):
    try:
        return service.form(req.members, req.preferred_size)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/breakdown", response_model=CategoryBreakdown, summary="Category coverage of a team")
def breakdown(team: Team):
    return service.breakdown(team)


@router.post("/swap", response_model=PartitioningResult, summary="Swap two members between teams")
def swap(req: SwapReq):
    try:
        return service.swap(req.teams, req.member_a_id, req.member_b_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/categories", response_model=List[InterestOption], summary="Interest tags with their categories")
def categories():
    return service.interests()
