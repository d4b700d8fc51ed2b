from datetime import datetime, timezone

import pytest

from conftest import make_row
from market_research.models.insights import InsightType, SAMPLE_INSIGHTS, SAMPLE_METRICS, QUICK_ACTIONS
from market_research.models.research import ResearchEntry
from market_research.views.cards import ResearchCard, format_date, preview, segment_label
from market_research.views.dashboard import render_dashboard, render_insights
from market_research.views.listing import EMPTY_TITLE, ListState, ResearchList


def _entry(**overrides):
    return ResearchEntry.model_validate(make_row(**overrides))


def _noop(*_):
    return None


def test_format_date():
    assert format_date(datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)) == "Jan 5, 2024"
    assert format_date(datetime(2023, 12, 25)) == "Dec 25, 2023"
    assert format_date(None) == ""


def test_preview_truncates_to_100_characters():
    long_text = "x" * 250
    assert preview(long_text) == "x" * 100 + "..."
    assert preview("short") == "short..."
    assert preview("") is None
    assert preview(None) is None


@pytest.mark.parametrize("count,label", [(0, "0 target segments"), (1, "1 target segment"), (3, "3 target segments")])
def test_segment_label_pluralizes(count, label):
    assert segment_label(count) == label


def test_card_summarizes_full_entry():
    view = ResearchCard(_entry(), _noop, _noop).render()
    assert view.title == "Q4 Review"
    assert view.created_label == "Jan 5, 2024"
    assert view.market_size_preview == "TAM $2.1B..."
    assert view.positioning_preview == "Command center for agencies..."
    assert view.segment_count == 2
    assert view.segment_label == "2 target segments"
    assert view.badges == ["Market Trends", "Competitors", "Segments"]


def test_card_omits_absent_sections():
    entry = _entry(
        market_size_analysis=None,
        market_trends_tracking="",
        competitor_identification=None,
        positioning_strategy=None,
        target_segments=[],
    )
    view = ResearchCard(entry, _noop, _noop).render()
    assert view.market_size_preview is None
    assert view.positioning_preview is None
    assert view.badges == []
    assert view.segment_label == "0 target segments"


def test_card_forwards_actions():
    edited, deleted = [], []
    entry = _entry(id="r9")
    card = ResearchCard(entry, edited.append, deleted.append)

    card.edit()
    card.delete()

    assert edited == [entry]
    assert deleted == ["r9"]


def test_loading_list_shows_only_indicator():
    researches = [_entry(id="a"), _entry(id="b")]
    research_list = ResearchList(researches, True, _noop, _noop)
    view = research_list.render()
    assert view.state == ListState.LOADING
    assert view.cards == []
    assert view.message != EMPTY_TITLE
    assert research_list.cards() == []


def test_empty_list_shows_message_and_no_cards():
    view = ResearchList([], False, _noop, _noop).render()
    assert view.state == ListState.EMPTY
    assert view.message == EMPTY_TITLE
    assert view.cards == []


def test_list_keeps_input_order():
    researches = [
        _entry(id="b", created_at="2024-01-01T00:00:00+00:00"),
        _entry(id="a", created_at="2024-06-01T00:00:00+00:00"),
        _entry(id="c", created_at="2023-01-01T00:00:00+00:00"),
    ]
    view = ResearchList(researches, False, _noop, _noop).render()
    assert view.state == ListState.GRID
    assert [c.id for c in view.cards] == ["b", "a", "c"]


def test_dashboard_carries_sample_content():
    view = render_dashboard(SAMPLE_METRICS, SAMPLE_INSIGHTS, QUICK_ACTIONS)
    assert [m.title for m in view.metrics] == ["Market Size", "Target Audience", "Competition Level", "Growth Rate"]
    assert view.metrics[0].value == "$2.4B"
    assert [i.type for i in view.insights] == [InsightType.OPPORTUNITY, InsightType.THREAT, InsightType.TREND]
    assert view.insights[1].priority_label == "medium priority"
    assert QUICK_ACTIONS[2].action is None

    insights = render_insights(SAMPLE_INSIGHTS)
    assert insights.title == "Market Insights"
    assert len(insights.insights) == 3
