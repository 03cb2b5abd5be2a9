"""
Keyword opportunity analysis for a team's site.
"""
import logging
from typing import Any, List, Optional

import pydantic

from . import config
from .data_source import KeywordDataSource, SimulatedDataSource
from .models import AnalysisRequest, AnalysisResponse, AnalysisSummary, KeywordAnalysis
from .recommendations import get_content_suggestion, get_llm_strategy
from .scoring import calculate_opportunity_score, classify_gap

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: teamName and keywords array"
MAX_COMPETITORS = 3


class InvalidAnalysisRequest(ValueError):
    """Raised when an analysis payload is missing or has malformed fields."""
    pass


def parse_analysis_request(payload: Any, max_keywords: Optional[int] = None) -> AnalysisRequest:
    """
    Validate a decoded JSON body and build an AnalysisRequest.

    `teamName` must be present and non-empty and `keywords` must be a list
    (an empty list is allowed). Only the first `max_keywords` keywords are
    analyzed, so only those must be strings; later entries are just counted.

    Raises:
        InvalidAnalysisRequest: If the payload doesn't describe a valid request
    """
    if (
        not isinstance(payload, dict)
        or not payload.get("teamName")
        or not isinstance(payload.get("keywords"), list)
    ):
        raise InvalidAnalysisRequest(MISSING_FIELDS_MESSAGE)

    try:
        request = AnalysisRequest.model_validate(payload)
    except pydantic.ValidationError as e:
        logger.warning(f"Rejected analysis payload: {e.error_count()} validation errors")
        raise InvalidAnalysisRequest(MISSING_FIELDS_MESSAGE) from e

    limit = config.MAX_KEYWORDS if max_keywords is None else max_keywords
    if not all(isinstance(keyword, str) for keyword in request.keywords[:limit]):
        logger.warning("Rejected analysis payload: non-string keyword among those to analyze")
        raise InvalidAnalysisRequest(MISSING_FIELDS_MESSAGE)
    return request


def format_team_rank(team_rank: Optional[int]) -> str:
    return "Not found" if team_rank is None else f"#{team_rank}"


class KeywordOpportunityAnalyzer:
    """
    Builds ranked keyword opportunity analyses for a team.

    Per keyword the pipeline is: competitors, team rank, opportunity score,
    gap type, content suggestion, AI-search strategy, search volume. Only the
    first `max_keywords` keywords are analyzed.
    """

    def __init__(
        self,
        data_source: Optional[KeywordDataSource] = None,
        max_keywords: Optional[int] = None,
        high_opportunity_threshold: Optional[int] = None,
    ):
        self.data_source = data_source or SimulatedDataSource()
        self.max_keywords = config.MAX_KEYWORDS if max_keywords is None else max_keywords
        if self.max_keywords < 0:
            raise ValueError(f"max_keywords must be 0 or greater, got {self.max_keywords}")
        self.high_opportunity_threshold = (
            config.HIGH_OPPORTUNITY_THRESHOLD if high_opportunity_threshold is None
            else high_opportunity_threshold
        )
        logger.info(f"KeywordOpportunityAnalyzer initialized with '{self.data_source.name}' data source")

    def analyze_keyword(self, keyword: str) -> KeywordAnalysis:
        """Run the full pipeline for one keyword."""
        competitors = self.data_source.get_competitors(keyword)
        team_rank = self.data_source.get_team_rank(keyword)
        opportunity = calculate_opportunity_score(keyword, team_rank, competitors)

        return KeywordAnalysis(
            keyword=keyword,
            opportunity=opportunity,
            gap_type=classify_gap(keyword, competitors),
            team_rank=format_team_rank(team_rank),
            competitors=competitors[:MAX_COMPETITORS],
            content_suggestion=get_content_suggestion(keyword),
            llm_strategy=get_llm_strategy(keyword),
            search_volume=self.data_source.get_search_volume(keyword),
            is_real_data=self.data_source.is_real_data,
            cost=self.data_source.cost_per_keyword,
        )

    def summarize(self, analyses: List[KeywordAnalysis]) -> AnalysisSummary:
        return AnalysisSummary(
            high_opportunity=sum(1 for a in analyses if a.opportunity >= self.high_opportunity_threshold),
            total_search_volume=sum(a.search_volume for a in analyses),
            real_data_count=sum(1 for a in analyses if a.is_real_data),
        )

    def analyze(self, request: AnalysisRequest, request_id: Optional[str] = None) -> AnalysisResponse:
        """
        Analyze the request's keywords and rank them by opportunity.

        Args:
            request: Validated analysis request
            request_id: Optional ID used to prefix log lines

        Returns:
            AnalysisResponse: Analyses sorted by opportunity (highest first);
            `total_keywords` counts every submitted keyword, analyzed or not
        """
        prefix = f"[{request_id}] " if request_id else ""
        logger.info(f"{prefix}Starting analysis for: {request.team_name} ({request.league})")

        analyses = []
        for keyword in request.keywords[:self.max_keywords]:
            analysis = self.analyze_keyword(keyword)
            logger.debug(
                f"{prefix}'{keyword}': opportunity={analysis.opportunity}, "
                f"gap='{analysis.gap_type.value}', rank={analysis.team_rank}"
            )
            analyses.append(analysis)

        if len(request.keywords) > self.max_keywords:
            logger.info(
                f"{prefix}Analyzed first {self.max_keywords} of {len(request.keywords)} keywords"
            )

        # sorted() is stable, so ties keep submission order
        analyses = sorted(analyses, key=lambda a: a.opportunity, reverse=True)

        response_fields = dict(
            success=True,
            team_name=request.team_name,
            total_keywords=len(request.keywords),
            analyses=analyses,
            summary=self.summarize(analyses),
        )
        # An explicit null league is echoed back; a missing one stays missing
        if "league" in request.model_fields_set:
            response_fields["league"] = request.league

        logger.info(f"{prefix}Analysis complete for {request.team_name}")
        return AnalysisResponse(**response_fields)
