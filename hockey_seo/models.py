"""
Pydantic models for the Hockey SEO Opportunity Analyzer.
Defines the request payload, per-keyword analyses and the response summary.
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union

# --- Enumerations ---

class GapType(str, Enum):
    """Why a keyword represents a content opportunity."""
    FIRST_TIMER = "First-Timer Experience Gap"
    ARENA_INFORMATION = "Arena Information Gap"
    TICKET_RESELLER = "Ticket Reseller Dominance"
    VENUE_EXPERIENCE = "Venue Experience Gap"
    GENERAL = "General Content Gap"

# --- Per-keyword models ---

class ContentSuggestion(BaseModel):
    """Recommended piece of content for a keyword."""
    title: str
    format: str
    cta: str

class KeywordAnalysis(BaseModel):
    """
    Opportunity analysis for a single keyword.

    `team_rank` is already formatted for display ("#3" or "Not found").
    """
    keyword: str
    opportunity: int = Field(..., ge=3, le=10)
    gap_type: GapType = Field(..., alias="gapType")
    team_rank: str = Field(..., alias="teamRank")
    competitors: List[str] = []
    content_suggestion: ContentSuggestion = Field(..., alias="contentSuggestion")
    llm_strategy: str = Field(..., alias="llmStrategy")
    search_volume: int = Field(..., alias="searchVolume")
    is_real_data: bool = Field(False, alias="isRealData")
    cost: Union[int, float] = 0

    class Config:
        populate_by_name = True

# --- API Request/Response Models ---

class AnalysisRequest(BaseModel):
    """Request model for keyword opportunity analysis."""
    team_name: str = Field(..., alias="teamName", description="Team whose site is being analyzed")
    league: Optional[str] = Field(None, description="Optional: league the team plays in (e.g., 'NHL', 'AHL')")
    keywords: List[Any] = Field(..., description="Search keywords; only the first few are analyzed and must be strings")
    email: Optional[str] = Field(None, description="Optional: contact email, currently unused")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "teamName": "Hartford Wolf Pack",
                "league": "AHL",
                "keywords": [
                    "first time hockey game what to expect",
                    "cheap tickets near arena",
                    "arena parking"
                ],
                "email": "fan@example.com"
            }
        }

class AnalysisSummary(BaseModel):
    """Aggregate figures over the analyzed keywords."""
    high_opportunity: int = Field(0, alias="highOpportunity")
    total_search_volume: int = Field(0, alias="totalSearchVolume")
    real_data_count: int = Field(0, alias="realDataCount")

    class Config:
        populate_by_name = True

class AnalysisResponse(BaseModel):
    """Response model for keyword opportunity analysis."""
    success: bool = True
    team_name: str = Field(..., alias="teamName")
    league: Optional[str] = None
    total_keywords: int = Field(..., alias="totalKeywords")
    analyses: List[KeywordAnalysis] = []
    summary: AnalysisSummary

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "success": True,
                "teamName": "Hartford Wolf Pack",
                "league": "AHL",
                "totalKeywords": 1,
                "analyses": [
                    {
                        "keyword": "cheap tickets near arena",
                        "opportunity": 10,
                        "gapType": "Ticket Reseller Dominance",
                        "teamRank": "Not found",
                        "competitors": ["stubhub.com", "ticketmaster.com", "seatgeek.com"],
                        "contentSuggestion": {
                            "title": "Comprehensive Fan Guide",
                            "format": "Detailed FAQ with local tips",
                            "cta": "Get Tickets"
                        },
                        "llmStrategy": "Optimize with natural language and hockey-specific terminology for AI search",
                        "searchVolume": 640,
                        "isRealData": False,
                        "cost": 0
                    }
                ],
                "summary": {
                    "highOpportunity": 1,
                    "totalSearchVolume": 640,
                    "realDataCount": 0
                }
            }
        }

    def to_payload(self) -> dict:
        """JSON-ready dict with camelCase keys; league is omitted unless it was given."""
        exclude = None if "league" in self.model_fields_set else {"league"}
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
