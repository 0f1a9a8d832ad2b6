"""Recovers the audit JSON object from a free-text AI reply.

Two stages keep the fragile part isolated: ``extract_json_candidate`` does
best-effort string surgery, ``parse_audit_response`` strict-parses the
candidate and nothing else.
"""

import json
import re
from typing import Any

from compliance_audit.analysis.exceptions import AuditResponseError

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)
_OBJECT_SPAN_RE = re.compile(r"\{[\s\S]*\}")


def extract_json_candidate(raw: str) -> str:
    """Narrow a reply down to the text most likely to be the JSON object."""
    candidate = raw.strip()
    fence = _FENCE_RE.search(candidate)
    if fence:
        candidate = fence.group(1).strip()
    span = _OBJECT_SPAN_RE.search(candidate)
    if span:
        candidate = span.group(0)
    return candidate


def parse_audit_response(raw: str) -> dict[str, Any]:
    """Parse a reply into a JSON object.

    Raises:
        AuditResponseError: if no JSON object can be decoded.
    """
    candidate = extract_json_candidate(raw)
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise AuditResponseError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise AuditResponseError("JSON response must be an object")
    return parsed
