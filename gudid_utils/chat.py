"""
gudid_utils/chat.py

Agent chat helpers: a text snapshot of the filtered data, prompt assembly,
and a small Gemini REST client.

The snapshot is built from an AggregateResult and the active FilterCriteria,
so the agent always sees the same numbers as the dashboard tiles.
"""

import logging
import os
from typing import Dict, List, Optional

import requests

from .agents import AgentDef
from .aggregation import AggregateResult
from .config import (
    DEFAULT_TEMPERATURE,
    GEMINI_API_KEY_ENV,
    GEMINI_ENDPOINT,
    REQUEST_TIMEOUT_SECONDS,
)
from .filters import FilterCriteria

logger = logging.getLogger(__name__)


class ChatServiceError(RuntimeError):
    """Raised when the generative text service returns no usable text."""


# =============================================================================
# Prompt Building
# =============================================================================

def build_data_context(result: AggregateResult, criteria: FilterCriteria) -> str:
    """Multi-line snapshot of the filtered data for the agent prompt."""
    top_device = result.top_devices[0].name if result.top_devices else "N/A"
    start = criteria.start_date.isoformat() if criteria.start_date else "Start"
    end = criteria.end_date.isoformat() if criteria.end_date else "End"

    lines = [
        "Current Data Snapshot (Filtered):",
        f"Total Lines: {result.total_lines}",
        f"Total Units: {result.total_units}",
        f"Unique Suppliers: {result.unique_suppliers}",
        f"Unique Customers: {result.unique_customers}",
        f"Top Device: {top_device}",
        f"Time Range: {start} to {end}",
        f"Filter Applied: Supplier={criteria.supplier or 'All'}, "
        f"Device={criteria.device or 'All'}",
    ]
    return "\n".join(lines)


def build_prompt(agent: AgentDef, data_context: str, query: str) -> str:
    return (
        f"{agent.system_prompt.strip()}\n\n"
        f"DATA CONTEXT:\n{data_context}\n\n"
        f"USER QUERY:\n{query.strip()}"
    )


# =============================================================================
# Gemini Client
# =============================================================================

def get_api_key(secrets=None) -> str:
    """
    API key from Streamlit secrets ([gemini] api_key), falling back to the
    GEMINI_API_KEY environment variable. Returns "" when neither is set.
    """
    if secrets is not None:
        try:
            key = secrets["gemini"]["api_key"]
            if key:
                return str(key).strip()
        except (KeyError, TypeError, FileNotFoundError):
            pass
    return os.environ.get(GEMINI_API_KEY_ENV, "").strip()


def extract_text(payload: Dict) -> str:
    """Join the text parts of the first candidate in a generateContent reply."""
    candidates: List[Dict] = payload.get("candidates") or []
    if not candidates:
        raise ChatServiceError("Model returned no candidates")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts).strip()
    if not text:
        raise ChatServiceError("Model returned an empty response")
    return text


def generate_response(
    prompt: str,
    model: str,
    api_key: str,
    temperature: float = DEFAULT_TEMPERATURE,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Send one prompt to the Gemini generateContent endpoint and return the text.

    Raises:
        requests.HTTPError: non-2xx response
        ChatServiceError: reply without text
    """
    body = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {"temperature": temperature},
    }
    http = session or requests
    r = http.post(
        GEMINI_ENDPOINT.format(model=model),
        params={"key": api_key},
        json=body,
        timeout=REQUEST_TIMEOUT_SECONDS,
    )
    r.raise_for_status()

    text = extract_text(r.json())
    logger.info(f"Received {len(text)} chars from {model}")
    return text
