from market_research.config import WorkspaceConfig
from market_research.stores.base import ResearchStore
from market_research.stores.memory import InMemoryResearchStore

def build_store(config: WorkspaceConfig) -> ResearchStore:
    """Pick the store backend named by the configuration."""
    if config.backend == "memory":
        return InMemoryResearchStore()
    # Imported lazily so the memory backend works without supabase credentials
    from market_research.stores.supabase_store import SupabaseResearchStore
    return SupabaseResearchStore.from_config(config)
