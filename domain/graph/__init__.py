from .cycle_guard import CycleGuard
from .edge_store import EdgeStore

__all__ = ['CycleGuard', 'EdgeStore']
