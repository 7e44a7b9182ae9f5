# teamforge/domain/models.py
from pydantic import BaseModel, Field
from typing import List, Optional


class Category(BaseModel):
    name: str
    color: str
    tags: List[str] = Field(default_factory=list)


class InterestOption(BaseModel):
    tag: str
    category: str
    color: str


class Member(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    # unknown tags and duplicates are kept as given
    interests: List[str] = Field(default_factory=list)


class Team(BaseModel):
    id: str
    name: str
    members: List[Member] = Field(default_factory=list)


class DiversityStats(BaseModel):
    per_team_score: List[int] = Field(default_factory=list)
    total_score: int = 0
    max_possible_score: int = 0
    average_score: float = 0.0
    coverage_percent: int = 0


class PartitioningResult(BaseModel):
    teams: List[Team] = Field(default_factory=list)
    stats: DiversityStats = Field(default_factory=DiversityStats)


class CategoryDetail(BaseModel):
    category: str
    color: str
    members: List[str] = Field(default_factory=list)


class CategoryBreakdown(BaseModel):
    count: int
    total: int
    details: List[CategoryDetail] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
