"""Shared LLM call with a bounded wait.

Provides the single function for calling the Gemini model. The intent
classifier and both extractors use this function. Each stage wraps it in its
own try/except to implement its failure policy (unavailable, degrade, or
absent).

Every call is made exactly once and bounded by LLM_TIMEOUT_SECONDS. Vendor
errors are converted to builtin exceptions and surfaced to the stage; there
is no automatic retry.

The Vertex SDK takes no per-request deadline, so the wait is enforced on a
worker pool. A timed-out call cannot be interrupted: it keeps its worker
until the SDK returns. A slot semaphore sized to the pool makes later calls
time out while waiting for a free worker instead of queuing behind a hung
one, so no call ever waits longer than LLM_TIMEOUT_SECONDS in total.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from claimso.config import LLM_MAX_WORKERS, LLM_TEMPERATURE, LLM_TIMEOUT_SECONDS
from claimso.llm.gemini import get_gemini_model_with_options
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter

logger = get_logger(__name__)

_EXECUTOR = ThreadPoolExecutor(max_workers=LLM_MAX_WORKERS, thread_name_prefix="llm")
_SLOTS = threading.BoundedSemaphore(LLM_MAX_WORKERS)


def _generate_with_timeout(model, prompt: str, generation_config: dict, timeout: float) -> str:
    """Run generate_content on the worker pool and stop waiting after ``timeout`` seconds.

    The deadline covers both waiting for a free worker and the call itself.
    """
    deadline = time.monotonic() + timeout
    slots = _SLOTS
    if not slots.acquire(timeout=timeout):
        raise TimeoutError("no free LLM worker")

    try:
        future = _EXECUTOR.submit(model.generate_content, prompt, generation_config=generation_config)
    except BaseException:
        slots.release()
        raise
    # Held until the SDK returns, even after the caller gave up.
    future.add_done_callback(lambda _f: slots.release())

    try:
        response = future.result(timeout=max(deadline - time.monotonic(), 0.0))
    except TimeoutError:
        future.cancel()
        raise
    return response.text


def call_llm(
    prompt: str,
    counter_prefix: str = "llm",
    system_instruction: str | None = None,
    max_output_tokens: int = 500,
    temperature: float = LLM_TEMPERATURE,
    json_response: bool = True,
) -> str:
    """Call LLM once with a timeout and Vertex AI exception conversion.

    Args:
        prompt: The user prompt (email content) to send to the model.
        counter_prefix: Telemetry counter prefix (e.g., "classifier", "receipt").
        system_instruction: Optional system instruction (cached by Gemini per-model).
        max_output_tokens: Output budget for this stage.
        temperature: Sampling temperature; stages use a low value for determinism.
        json_response: Request ``application/json`` output from the model.

    Returns:
        The model's response text.

    Raises:
        TimeoutError: On deadline exceeded, local timeout or no free worker.
        ConnectionError: On service unavailable or internal error.
        OSError: On resource exhausted / rate limited.
        Exception: On other errors (caller handles).
    """
    from google.api_core.exceptions import (
        DeadlineExceeded,
        InternalServerError,
        ResourceExhausted,
        ServiceUnavailable,
    )

    model = get_gemini_model_with_options(system_instruction=system_instruction)

    generation_config: dict = {
        "temperature": temperature,
        "max_output_tokens": max_output_tokens,
    }
    if json_response:
        generation_config["response_mime_type"] = "application/json"

    try:
        return _generate_with_timeout(model, prompt, generation_config, LLM_TIMEOUT_SECONDS)
    except (DeadlineExceeded, TimeoutError) as e:
        counter(f"llm.{counter_prefix}.timeout")
        logger.warning("LLM call timed out after %ss", LLM_TIMEOUT_SECONDS)
        raise TimeoutError(f"LLM call timed out: {e}") from e
    except ServiceUnavailable as e:
        counter(f"llm.{counter_prefix}.service_unavailable")
        logger.warning("LLM service unavailable: %s", e)
        raise ConnectionError(f"LLM service unavailable: {e}") from e
    except ResourceExhausted as e:
        counter(f"llm.{counter_prefix}.rate_limited")
        logger.warning("LLM rate limited (429): %s", e)
        raise OSError(f"LLM rate limited: {e}") from e
    except InternalServerError as e:
        counter(f"llm.{counter_prefix}.internal_error")
        logger.warning("LLM internal error (500): %s", e)
        raise ConnectionError(f"LLM internal error: {e}") from e
    except Exception as e:
        logger.error("LLM call failed: %s", e)
        raise
