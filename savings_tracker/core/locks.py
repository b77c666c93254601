# savings_tracker/core/locks.py
"""
Per-goal locks for the balance-check-and-append critical section.

The lock serializes appends to one goal inside this process. Across
processes the goal row lock (SELECT ... FOR UPDATE) and the unique
(goal_id, position) constraint take over.
"""
import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Hashable


class GoalLocks:
    def __init__(self):
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._waiters: Dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, goal_id: Hashable) -> AsyncIterator[None]:
        lock = self._locks.setdefault(goal_id, asyncio.Lock())
        self._waiters[goal_id] = self._waiters.get(goal_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[goal_id] -= 1
            # Idle goals keep no lock
            if self._waiters[goal_id] == 0:
                del self._waiters[goal_id]
                del self._locks[goal_id]

    def __len__(self) -> int:
        return len(self._locks)


goal_locks = GoalLocks()
