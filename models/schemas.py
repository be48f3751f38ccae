from typing import List
from pydantic import BaseModel, Field


class CandidateScore(BaseModel):
    name: str
    email: str = ''
    score: int = Field(..., ge=0, le=100)


class BatchEvaluation(BaseModel):
    total: int = Field(..., ge=0)
    qualifying: List[CandidateScore] = Field(default_factory=list)


class SingleEvaluation(CandidateScore):
    matchedKeywords: List[str] = Field(default_factory=list)
    missingKeywords: List[str] = Field(default_factory=list)
