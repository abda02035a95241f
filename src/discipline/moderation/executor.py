from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Optional

from .adapters import CapabilityAdapter, default_adapters
from .models import Enforce, EnforcementResult, Failed, FailureCause, Succeeded, Unsupported

log = logging.getLogger("discipline.moderation.executor")


class EnforcementExecutor:
    """Applies an ``Enforce`` decision through the first usable adapter.

    Adapters are probed in registration order. An adapter that is not usable is
    skipped. The first usable adapter is invoked and its outcome is final: a
    failed invocation is reported, never retried against the next adapter, since
    the backend may already have applied part of it.

    Errors come back as ``EnforcementResult`` values; nothing raised by a
    backend escapes ``enforce``.
    """

    def __init__(
        self,
        connection: Any,
        adapters: Optional[Iterable[CapabilityAdapter]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        self.connection = connection
        self.adapters: tuple[CapabilityAdapter, ...] = tuple(adapters) if adapters is not None else default_adapters()
        names = [a.name for a in self.adapters]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate adapter names: {names}")
        self.timeout = timeout if timeout and timeout > 0 else None

    async def enforce(self, scope_id: str, target_id: str, decision: Enforce) -> EnforcementResult:
        if not isinstance(decision, Enforce):
            raise TypeError(f"enforce() needs an Enforce decision, got {decision!r}")

        for adapter in self.adapters:
            try:
                usable = adapter.probe(self.connection)
            except Exception as e:
                # Probing has no side effects, so a broken probe just means "not this one".
                log.warning("enforce: probe for %s raised %s: %s", adapter.name, type(e).__name__, e)
                continue
            if not usable:
                log.debug("enforce: adapter %s not usable, skipping", adapter.name)
                continue
            return await self._attempt(adapter, scope_id, target_id, decision)

        log.warning("enforce: no usable adapter for scope=%s target=%s (tried %d)", scope_id, target_id, len(self.adapters))
        return Unsupported()

    async def _attempt(self, adapter: CapabilityAdapter, scope_id: str, target_id: str, decision: Enforce) -> EnforcementResult:
        try:
            if self.timeout is not None:
                await asyncio.wait_for(
                    adapter.invoke(self.connection, scope_id, target_id, decision.duration_ms),
                    timeout=self.timeout,
                )
            else:
                await adapter.invoke(self.connection, scope_id, target_id, decision.duration_ms)
        except asyncio.TimeoutError:
            log.error("enforce: %s timed out scope=%s target=%s; outcome unknown", adapter.name, scope_id, target_id)
            return Failed(adapter.name, FailureCause(kind="timeout", message="backend call timed out", error_type="TimeoutError"))
        except asyncio.CancelledError:
            log.error("enforce: %s cancelled scope=%s target=%s; outcome unknown", adapter.name, scope_id, target_id)
            return Failed(adapter.name, FailureCause(kind="cancelled", message="backend call was cancelled", error_type="CancelledError"))
        except Exception as e:
            log.warning("enforce: %s failed scope=%s target=%s: %s", adapter.name, scope_id, target_id, e, exc_info=e)
            return Failed(adapter.name, FailureCause.from_exception(e))

        log.info("enforce: %s applied scope=%s target=%s duration_ms=%d", adapter.name, scope_id, target_id, decision.duration_ms)
        return Succeeded(decision.duration_ms, adapter.name)
