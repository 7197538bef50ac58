# Overview: Session-scoped holder of the resolved permission set.

"""
PermissionStore: single source of truth for one session's permissions.

STATE MACHINE: UNLOADED -> LOADING -> LOADED
- load() moves UNLOADED/LOADED -> LOADING -> LOADED (or back to UNLOADED
  when no principal can be established or the identity provider fails)
- the held state is one immutable PermissionSnapshot replaced by a single
  assignment, so readers never see a half-updated set
- overlapping loads: the most recently started load wins; an older load
  finishing later is discarded

Stores are constructed explicitly and handed to callers. There is no
module-level instance.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union

from ..permissions import PermissionSet
from .principal_service import PrincipalResolver, Principal, Resolution, SessionData


logger = logging.getLogger(__name__)

SessionProvider = Callable[[], Union[SessionData, None, Awaitable[Union[SessionData, None]]]]


class StoreState:
    UNLOADED = "UNLOADED"
    LOADING = "LOADING"
    LOADED = "LOADED"


@dataclass(frozen=True)
class PermissionSnapshot:
    state: str
    is_administrator: bool = False
    permission_set: PermissionSet | None = None
    principal: Principal | None = None
    source: str | None = None

    @property
    def is_loaded(self) -> bool:
        return self.state == StoreState.LOADED and self.permission_set is not None

    @classmethod
    def from_resolution(cls, resolution: Resolution | None) -> "PermissionSnapshot":
        if resolution is None:
            return UNLOADED
        return cls(
            state=StoreState.LOADED,
            is_administrator=resolution.is_administrator,
            permission_set=resolution.permission_set,
            principal=resolution.principal,
            source=resolution.source,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state,
            "is_administrator": self.is_administrator if self.is_loaded else False,
            "principal": self.principal.to_dict() if self.principal else None,
            "source": self.source,
            "permissions": self.permission_set.to_dict() if self.is_loaded else None,
        }


UNLOADED = PermissionSnapshot(StoreState.UNLOADED)
LOADING = PermissionSnapshot(StoreState.LOADING)


class PermissionStore:
    def __init__(self, resolver: PrincipalResolver, session_provider: SessionProvider):
        self.resolver = resolver
        self.session_provider = session_provider
        self._snapshot = UNLOADED
        self._generation = 0

    def current(self) -> PermissionSnapshot:
        """Most recently loaded snapshot (UNLOADED before the first successful load)."""
        return self._snapshot

    @property
    def state(self) -> str:
        return self._snapshot.state

    async def load(self) -> PermissionSnapshot:
        """
        Resolve the principal and replace the held snapshot.

        Never raises: a failing identity provider is logged and leaves the
        store UNLOADED. Safe to call repeatedly.
        """
        self._generation += 1
        generation = self._generation
        self._snapshot = LOADING

        try:
            session = self.session_provider()
            if inspect.isawaitable(session):
                session = await session
            resolution = self.resolver.resolve(session) if session is not None else None
        except Exception:
            logger.exception("Failed to load permissions; store left unloaded")
            resolution = None

        if generation != self._generation:
            logger.debug("Discarding superseded permission load #%d", generation)
            return self._snapshot

        self._snapshot = PermissionSnapshot.from_resolution(resolution)
        return self._snapshot

    def load_sync(self) -> PermissionSnapshot:
        """
        Run load() to completion from synchronous code.

        Inside a running event loop (e.g. an async Flask view) a nested loop
        cannot be started: the store is reset to UNLOADED and the caller
        should await load() instead.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.load())

        logger.error("load_sync() called from a running event loop; await load() instead")
        self._generation += 1
        self._snapshot = UNLOADED
        return self._snapshot
