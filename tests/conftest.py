"""Shared pytest fixtures: scripted store, scripted prompts, sample rows."""
import asyncio
import copy

import pytest

from market_research.core.workspace import ResearchWorkspace
from market_research.models.research import Project
from market_research.stores.base import StoreError
from market_research.stores.memory import InMemoryResearchStore


class ScriptedStore(InMemoryResearchStore):
    """In-memory store that records calls and can fail or hold calls open.

    ``fail`` holds operation names that raise StoreError. ``gates`` maps an
    operation name, or an ``(operation, first_argument)`` pair, to an
    asyncio.Event the call waits on before doing anything.
    """

    def __init__(self, rows=None):
        super().__init__(rows)
        self.calls = []
        self.fail = set()
        self.gates = {}

    def ops(self, name):
        return [c for c in self.calls if c[0] == name]

    async def _enter(self, op, *args):
        self.calls.append((op,) + tuple(copy.deepcopy(a) for a in args))
        gate = self.gates.get((op, args[0])) if args and isinstance(args[0], str) else None
        gate = gate or self.gates.get(op)
        if gate is not None:
            await gate.wait()
        if op in self.fail:
            raise StoreError(f"{op} failed")

    async def list(self, project_id):
        await self._enter("list", project_id)
        return await super().list(project_id)

    async def insert(self, payload):
        await self._enter("insert", payload)
        return await super().insert(payload)

    async def update(self, research_id, payload):
        await self._enter("update", research_id, payload)
        return await super().update(research_id, payload)

    async def delete(self, research_id):
        await self._enter("delete", research_id)
        return await super().delete(research_id)


class Prompts:
    """Scripted confirm/notify capabilities; confirm answers yes unless told otherwise."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.confirmations = []
        self.alerts = []

    async def confirm(self, message):
        self.confirmations.append(message)
        return self.answers.pop(0) if self.answers else True

    async def notify(self, message):
        self.alerts.append(message)


async def wait_for_call(store, op, count=1):
    """Yield to the loop until ``store`` has seen ``count`` calls of ``op``."""
    for _ in range(200):
        if len(store.ops(op)) >= count:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"store never received {count} {op} call(s)")


def make_row(**overrides):
    row = {
        "id": "r1",
        "project_id": "p1",
        "title": "Q4 Review",
        "market_size_analysis": "TAM $2.1B",
        "market_trends_tracking": "Remote work growth",
        "competitor_identification": "Asana, Monday.com",
        "positioning_strategy": "Command center for agencies",
        "target_segments": [
            {"name": "Agencies", "description": "10-50 staff", "size": "$2.5M", "characteristics": "Design-led"},
            {"name": "Freelancers", "description": "Solo creatives", "size": "$800K", "characteristics": "Price-sensitive"},
        ],
        "created_at": "2024-01-05T10:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def project():
    return Project(id="p1", name="Creative SaaS")


@pytest.fixture
def other_project():
    return Project(id="p2", name="Fintech App")


@pytest.fixture
def store():
    return ScriptedStore()


@pytest.fixture
def prompts():
    return Prompts()


@pytest.fixture
def workspace(store, prompts):
    return ResearchWorkspace(store, confirm=prompts.confirm, notify=prompts.notify)
