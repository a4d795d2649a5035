"""Provider executors with status instrumentation."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TYPE_CHECKING

from pydantic import ValidationError

from graphics_api.exceptions import GraphicsAPIError
from graphics_api.models import GraphicResult, ProviderStatusSnapshot

if TYPE_CHECKING:
    from graphics_api.providers.base import SupportsSearch

logger = logging.getLogger(__name__)


def _coerce_results(provider_id: str, raw: Optional[Iterable[Any]]) -> List[GraphicResult]:
    """Validate rows one by one. A bad row is dropped, not the whole batch."""
    rows = list(raw or [])
    results: List[GraphicResult] = []
    rejected = 0
    for row in rows:
        if isinstance(row, GraphicResult):
            results.append(row)
            continue
        try:
            results.append(GraphicResult.model_validate(row))
        except ValidationError as e:
            rejected += 1
            logger.debug(f"[{provider_id}] Dropping malformed result: {e.error_count()} errors")

    if rejected:
        logger.warning(f"[{provider_id}] Dropped {rejected} of {len(rows)} malformed results")
        if not results:
            raise ValueError(f"All {rejected} results were malformed")
    return results


async def run_provider_with_status(
    provider_id: str,
    provider: Optional["SupportsSearch"],
    terms: Sequence[str],
    *,
    timeout_seconds: float = 8.0,
) -> Tuple[List[GraphicResult], ProviderStatusSnapshot]:
    """Run one provider search. Failures become an empty list plus a status."""
    if provider is None:
        return [], ProviderStatusSnapshot(
            provider_id=provider_id,
            status="unavailable",
            message="Provider not registered",
        )

    started = time.monotonic()
    try:
        results = await asyncio.wait_for(
            provider.search(list(terms)), timeout=timeout_seconds
        )
        results = _coerce_results(provider_id, results)
        elapsed_ms = int((time.monotonic() - started) * 1000)
        status = ProviderStatusSnapshot(
            provider_id=provider_id,
            status="ok",
            result_count=len(results),
            latency_ms=elapsed_ms,
        )
        return results, status
    except asyncio.TimeoutError:
        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.warning(f"[{provider_id}] Search timed out after {timeout_seconds}s")
        status = ProviderStatusSnapshot(
            provider_id=provider_id,
            status="timeout",
            result_count=0,
            latency_ms=elapsed_ms,
            message="Search timed out",
        )
        return [], status
    except Exception as e:
        elapsed_ms = int((time.monotonic() - started) * 1000)
        error_msg = str(e)
        extra = e.to_dict() if isinstance(e, GraphicsAPIError) else {"error": type(e).__name__}
        # "message" is reserved on LogRecord
        extra.pop("message", None)
        logger.warning(
            f"[{provider_id}] Search error: {type(e).__name__}: {error_msg}",
            extra={"provider_id": provider_id, **extra},
        )
        status = ProviderStatusSnapshot(
            provider_id=provider_id,
            status="error",
            result_count=0,
            latency_ms=elapsed_ms,
            message=f"Search failed: {error_msg[:100]}",
        )
        return [], status
