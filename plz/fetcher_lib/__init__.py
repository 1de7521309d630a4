"""Mirror-site lookup for plz.

- fetch.py: network fetching helpers
- parse.py: HTML parsing helpers, one parser per provider
- providers.py: provider adapters
- orchestrator.py: provider fallback
"""

# No exports needed - import directly from submodules
__all__ = []
