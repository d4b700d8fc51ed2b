"""
Static guidance content: per-field labels, placeholders and examples used by
the research form, and the worked example shown by the template browser.
"""

from typing import Dict, List
from pydantic import BaseModel

from market_research.models.research import Segment, TextField

class FieldGuide(BaseModel):
    label: str
    icon: str
    placeholder: str
    example: str
    rows: int = 5

class ResearchTemplate(BaseModel):
    title: str
    market_size_analysis: str
    market_trends_tracking: str
    competitor_identification: str
    positioning_strategy: str
    target_segments: List[Segment]

TITLE_PLACEHOLDER = "e.g., Q1 2024 SaaS Market Analysis"

SEGMENT_PLACEHOLDERS: Dict[str, str] = {
    "name": "Segment name (e.g., Creative Agencies)",
    "size": "Market size (e.g., $2.5M, 1,200 companies)",
    "description": (
        "Description and characteristics (e.g., Small to medium creative agencies "
        "(10-50 employees) specializing in brand design and digital marketing campaigns...)"
    ),
}

FIELD_GUIDES: Dict[TextField, FieldGuide] = {
    TextField.MARKET_SIZE_ANALYSIS: FieldGuide(
        label="Market Size Analysis",
        icon="bar-chart",
        placeholder=(
            "Analyze total addressable market (TAM), serviceable addressable market (SAM), "
            "and serviceable obtainable market (SOM)..."
        ),
        example=(
            "The global project management software market is valued at $5.37 billion in 2023, "
            "with a CAGR of 10.67%. Our TAM is $2.1B (SMB segment), SAM is $450M (under 500 "
            "employees), and our realistic SOM is $15M (3% market share in target regions)."
        ),
    ),
    TextField.MARKET_TRENDS_TRACKING: FieldGuide(
        label="Market Trends & Opportunities",
        icon="trending-up",
        placeholder="Identify key market trends, growth drivers, and emerging opportunities...",
        example=(
            "Key trends: 1) 73% increase in remote work driving collaboration tool adoption, "
            "2) AI integration becoming standard (40% of tools adding AI features), "
            "3) Integration-first approach (APIs and workflow automation), "
            "4) Mobile-first design requirements increasing 60% YoY."
        ),
    ),
    TextField.COMPETITOR_IDENTIFICATION: FieldGuide(
        label="Competitive Analysis",
        icon="target",
        placeholder=(
            "Identify direct and indirect competitors, their strengths, weaknesses, "
            "and market positioning..."
        ),
        example=(
            "Direct competitors: Asana ($3.2B valuation, strong UI/UX), Monday.com ($4.2B, "
            "visual project tracking), Trello (acquired by Atlassian, simple kanban). "
            "Indirect: Microsoft Project (enterprise), Notion (all-in-one workspace). "
            "Gap identified: No solution effectively serves creative agencies with client "
            "collaboration needs."
        ),
    ),
    TextField.POSITIONING_STRATEGY: FieldGuide(
        label="Market Positioning Strategy",
        icon="users",
        placeholder="Define your unique value proposition and competitive differentiation...",
        example=(
            "Position as \"The Creative Agency's Command Center\" - combining project management "
            "with client collaboration, asset management, and approval workflows. "
            "Differentiation: Built-in proofing tools, client portal, time tracking with "
            "creative-specific features, and integrations with design tools (Adobe, Figma)."
        ),
    ),
}

MARKET_RESEARCH_TEMPLATE = ResearchTemplate(
    title="SaaS Project Management Tool - Market Research",
    market_size_analysis=(
        "The global project management software market is valued at $5.37 billion in 2023, "
        "with a CAGR of 10.67%. Our Total Addressable Market (TAM) is $2.1B (SMB segment), "
        "Serviceable Addressable Market (SAM) is $450M (companies under 500 employees), and our "
        "realistic Serviceable Obtainable Market (SOM) is $15M (3% market share in target "
        "regions within 3 years)."
    ),
    market_trends_tracking=(
        "Key trends driving growth: 1) 73% increase in remote work driving collaboration tool "
        "adoption, 2) AI integration becoming standard (40% of tools adding AI features by "
        "2024), 3) Integration-first approach with APIs and workflow automation, 4) Mobile-first "
        "design requirements increasing 60% YoY, 5) Demand for specialized industry solutions "
        "growing 35% annually."
    ),
    competitor_identification=(
        "Direct competitors: Asana ($3.2B valuation, strong UI/UX but limited customization), "
        "Monday.com ($4.2B, visual project tracking but expensive for SMBs), Trello (acquired "
        "by Atlassian for $425M, simple kanban but lacks advanced features). Indirect "
        "competitors: Microsoft Project (enterprise focus), Notion (all-in-one workspace but "
        "complex for project management). Market gap: No solution effectively serves creative "
        "agencies with integrated client collaboration and approval workflows."
    ),
    positioning_strategy=(
        "Position as 'The Creative Agency's Command Center' - combining traditional project "
        "management with client collaboration, asset management, and approval workflows. Key "
        "differentiators: Built-in proofing tools, client portal with real-time feedback, time "
        "tracking with creative-specific features, native integrations with design tools "
        "(Adobe Creative Suite, Figma, Sketch), and workflow templates for common creative "
        "projects."
    ),
    target_segments=[
        Segment(
            name="Creative Agencies",
            size="$2.5M market, 1,200 agencies",
            description=(
                "Small to medium creative agencies (10-50 employees) specializing in brand "
                "design, digital marketing, and content creation. Currently using fragmented "
                "toolsets costing $200+/month per team."
            ),
        ),
        Segment(
            name="Freelance Creative Teams",
            size="$800K market, 3,500 freelancers",
            description=(
                "Independent creative professionals and small collectives managing multiple "
                "clients. Need professional client collaboration tools but can't afford "
                "enterprise solutions."
            ),
        ),
    ],
)
