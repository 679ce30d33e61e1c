"""Instrumentação de latência das chamadas ao modelo."""

from __future__ import annotations

import contextlib
import time
from collections.abc import Generator

from bionic.observability.logging import get_logger

logger = get_logger(__name__)


@contextlib.contextmanager
def timed(operation: str, model: str | None = None) -> Generator[None, None, None]:
    """Mede uma ida e volta ao modelo e loga `model_call_latency`.

    Uso:
        with timed("marketing_copy", model="gpt-4o-mini"):
            response = await client.chat.completions.create(...)

    Campos do log: operation, model, outcome (ok | error), elapsed_ms.
    A exceção original sempre é propagada.
    """
    start = time.perf_counter()
    outcome = "error"
    try:
        yield
        outcome = "ok"
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "model_call_latency",
            extra={
                "operation": operation,
                "model": model,
                "outcome": outcome,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
