"""
Example: record, edit and delete market research for a SaaS project using the
in-memory store.
"""

import asyncio

from market_research.core.workspace import ResearchWorkspace
from market_research.main import print_research_list
from market_research.models.research import Project, TextField
from market_research.models.templates import MARKET_RESEARCH_TEMPLATE
from market_research.stores.memory import InMemoryResearchStore

async def always_yes(message: str) -> bool:
    print(f"? {message} -> yes")
    return True

async def print_alert(message: str) -> None:
    print(f"!! {message}")

async def main():
    """Walk one research entry through its whole lifecycle"""

    project = Project(id="proj-creative-saas", name="Creative Agency SaaS")
    workspace = ResearchWorkspace(InMemoryResearchStore(), confirm=always_yes, notify=print_alert)

    print("=" * 60)
    print("MARKET RESEARCH WORKSPACE DEMO")
    print("=" * 60)

    await workspace.set_project(project)
    print_research_list(workspace)
    print("-" * 60)

    print("📝 Creating research from the example template...")
    form = workspace.new_research()
    template = MARKET_RESEARCH_TEMPLATE
    form.title = template.title
    for field in TextField:
        form.set_text(field, getattr(template, field.value))
    for segment in template.target_segments:
        row = form.segments.add_segment()
        row.update("name", segment.name)
        row.update("size", segment.size)
        row.update("description", segment.description)
    await form.submit()
    print_research_list(workspace)
    print("-" * 60)

    print("✏️  Dropping the first segment...")
    entry = workspace.researches[0]
    form = workspace.edit(entry)
    form.segments.rows()[0].remove()
    await form.submit()
    print_research_list(workspace)
    print("-" * 60)

    print("🗑️  Deleting the entry...")
    await workspace.delete(workspace.researches[0].id)
    print_research_list(workspace)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)

if __name__ == "__main__":
    asyncio.run(main())
