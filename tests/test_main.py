import asyncio

from market_research.examples import saas_demo
from market_research.main import main


def test_list_on_empty_project(monkeypatch, capsys):
    monkeypatch.setenv("MARKET_RESEARCH_BACKEND", "memory")
    assert main(["list", "p1"]) == 0
    out = capsys.readouterr().out
    assert "No market research entries found." in out


def test_delete_declined_on_console(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    assert main(["--backend", "memory", "delete", "p1", "r1"]) == 1
    assert "Nothing deleted." in capsys.readouterr().out


def test_templates_command(capsys):
    assert main(["templates"]) == 0
    out = capsys.readouterr().out
    assert "SaaS Project Management Tool - Market Research" in out
    assert "Segment 2: Freelance Creative Teams" in out


def test_demo_walks_full_lifecycle(capsys):
    asyncio.run(saas_demo.main())
    out = capsys.readouterr().out
    assert "2 target segments" in out
    assert "1 target segment " in out or "1 target segment\n" in out
    assert out.rstrip().endswith("=" * 60)
    assert "DEMO COMPLETE" in out
