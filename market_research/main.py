"""
Market Research workspace - console entry point
"""

import argparse
import asyncio
import logging
from typing import Optional

from market_research.config import WorkspaceConfig
from market_research.core.workspace import ResearchWorkspace
from market_research.models.research import Project
from market_research.models.templates import MARKET_RESEARCH_TEMPLATE
from market_research.stores.factory import build_store
from market_research.views.listing import ListState
from market_research.views.workspace import research_list

logger = logging.getLogger(__name__)

def configure_logging(level: str = "INFO") -> None:
	logging.basicConfig(
		level=getattr(logging, level.upper(), logging.INFO),
		format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
		datefmt="%Y-%m-%d %H:%M:%S",
	)

async def console_confirm(message: str) -> bool:
	"""Blocking yes/no prompt on stdin"""
	answer = await asyncio.to_thread(input, f"{message} [y/N] ")
	return answer.strip().lower() in {"y", "yes"}

async def console_notify(message: str) -> None:
	print(f"!! {message}")

def build_workspace(config: Optional[WorkspaceConfig] = None) -> ResearchWorkspace:
	"""
	Create a workspace wired to the configured store and console prompts.

	Args:
		config: Settings to use; read from the environment when omitted

	Returns:
		ResearchWorkspace with no active project
	"""
	config = config or WorkspaceConfig.from_env()
	store = build_store(config)
	return ResearchWorkspace(store, confirm=console_confirm, notify=console_notify)

def print_research_list(workspace: ResearchWorkspace) -> None:
	view = research_list(workspace).render()
	if view.state != ListState.GRID:
		print(view.message)
		if view.hint:
			print(view.hint)
		return
	for card in view.cards:
		print(f"[{card.id}] {card.title}  ({card.created_label})")
		if card.market_size_preview:
			print(f"    Market size: {card.market_size_preview}")
		if card.positioning_preview:
			print(f"    Positioning: {card.positioning_preview}")
		badges = f"  [{', '.join(card.badges)}]" if card.badges else ""
		print(f"    {card.segment_label}{badges}")

def print_template() -> None:
	template = MARKET_RESEARCH_TEMPLATE
	print(template.title)
	print("=" * len(template.title))
	for name in ("market_size_analysis", "market_trends_tracking",
			"competitor_identification", "positioning_strategy"):
		print(f"\n{name.replace('_', ' ').title()}:\n  {getattr(template, name)}")
	for i, segment in enumerate(template.target_segments, 1):
		print(f"\nSegment {i}: {segment.name} ({segment.size})\n  {segment.description}")

async def run(args: argparse.Namespace, config: WorkspaceConfig) -> int:
	if args.command == "templates":
		print_template()
		return 0

	workspace = build_workspace(config)
	await workspace.set_project(Project(id=args.project_id, name=args.project_id))

	if args.command == "delete":
		if not await workspace.delete(args.research_id):
			print("Nothing deleted.")
			return 1
	print_research_list(workspace)
	return 0

def main(argv=None):
	"""CLI entry point"""
	parser = argparse.ArgumentParser(description="Browse and manage market research entries")
	parser.add_argument("--backend", choices=["supabase", "memory"], help="Override MARKET_RESEARCH_BACKEND")
	subparsers = parser.add_subparsers(dest="command", required=True)

	list_parser = subparsers.add_parser("list", help="List a project's research, newest first")
	list_parser.add_argument("project_id")

	delete_parser = subparsers.add_parser("delete", help="Delete one research entry after confirming")
	delete_parser.add_argument("project_id")
	delete_parser.add_argument("research_id")

	subparsers.add_parser("templates", help="Show the example market research template")

	args = parser.parse_args(argv)

	config = WorkspaceConfig.from_env()
	if args.backend:
		config.backend = args.backend
	configure_logging(config.log_level)

	return asyncio.run(run(args, config))

if __name__ == "__main__":
	raise SystemExit(main())
