"""
Hockey SEO Opportunity Analyzer
Ranks a hockey team's search keywords by content opportunity and suggests what to publish.
"""

from .models import (
    GapType, ContentSuggestion, KeywordAnalysis,
    AnalysisRequest, AnalysisSummary, AnalysisResponse
)
from .data_source import KeywordDataSource, SimulatedDataSource
from .analyzer import KeywordOpportunityAnalyzer, InvalidAnalysisRequest, parse_analysis_request

__version__ = "1.0.0"
