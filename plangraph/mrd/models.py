"""
Data models for market requirements documents.

Only the tag-bearing parts of an MRD are typed in detail; overview,
positioning and pricing sections are carried as plain JSON.
"""

from typing import Any, Optional

from plangraph.prd.models import (
    Assumption,
    CustomSection,
    GlossaryTerm,
    Metadata,
    PlanModel,
)


class ExecutiveSummary(PlanModel):
    market_opportunity: str = ""
    proposed_offering: str = ""
    key_findings: list[str] = []
    recommendation: str = ""


class MarketSegment(PlanModel):
    id: str = ""
    name: str = ""
    description: str = ""
    size: str = ""
    growth: str = ""
    needs: list[str] = []
    challenges: list[str] = []
    tags: list[str] = []


class BuyerPersona(PlanModel):
    id: str = ""
    name: str = ""
    title: str = ""
    description: str = ""
    buying_role: str = ""                      # Decision Maker, Influencer, User, Gatekeeper
    budget_authority: bool = False
    pain_points: list[str] = []
    goals: list[str] = []
    buying_criteria: list[str] = []
    tags: list[str] = []


class TargetMarket(PlanModel):
    primary_segments: list[MarketSegment] = []
    secondary_segments: list[MarketSegment] = []
    buyer_personas: list[BuyerPersona] = []
    verticals: list[str] = []
    geographic_focus: list[str] = []
    company_size: list[str] = []


class Competitor(PlanModel):
    id: str = ""
    name: str = ""
    description: str = ""
    category: str = ""                         # Direct, Indirect, Substitute
    market_share: str = ""
    strengths: list[str] = []
    weaknesses: list[str] = []
    pricing: str = ""
    positioning: str = ""
    threat_level: str = ""
    tags: list[str] = []


class CompetitiveLandscape(PlanModel):
    overview: str = ""
    competitors: list[Competitor] = []
    market_position: str = ""
    differentiators: list[str] = []
    competitive_gaps: list[str] = []


class MarketRequirement(PlanModel):
    id: str = ""
    title: str = ""
    description: str = ""
    priority: str = ""                         # must, should, could, wont
    category: str = ""
    source: str = ""
    validation: str = ""
    segments: list[str] = []
    personas: list[str] = []
    tags: list[str] = []


class Milestone(PlanModel):
    id: str = ""
    name: str = ""
    description: str = ""
    target_date: str = ""
    status: str = ""
    tags: list[str] = []


class GoToMarket(PlanModel):
    launch_strategy: str = ""
    launch_timing: str = ""
    pricing_strategy: Optional[dict[str, Any]] = None
    distribution_channels: list[str] = []
    partner_strategy: str = ""
    marketing_strategy: str = ""
    sales_strategy: str = ""
    milestones: list[Milestone] = []


class SuccessMetric(PlanModel):
    id: str = ""
    name: str = ""
    description: str = ""
    metric: str = ""
    target: str = ""
    timeframe: str = ""
    measurement_method: str = ""
    tags: list[str] = []


class MarketRisk(PlanModel):
    id: str = ""
    description: str = ""
    probability: str = ""
    impact: str = ""
    mitigation: str = ""
    category: str = ""                         # Market, Competitive, Regulatory, ...
    tags: list[str] = []


class MarketDocument(PlanModel):
    """A complete market requirements document."""
    metadata: Metadata = Metadata()
    executive_summary: ExecutiveSummary = ExecutiveSummary()
    market_overview: Optional[dict[str, Any]] = None
    target_market: TargetMarket = TargetMarket()
    competitive_landscape: CompetitiveLandscape = CompetitiveLandscape()
    market_requirements: list[MarketRequirement] = []
    positioning: Optional[dict[str, Any]] = None
    go_to_market: Optional[GoToMarket] = None
    success_metrics: list[SuccessMetric] = []

    # Optional sections
    risks: list[MarketRisk] = []
    assumptions: list[Assumption] = []
    glossary: list[GlossaryTerm] = []
    custom_sections: list[CustomSection] = []
