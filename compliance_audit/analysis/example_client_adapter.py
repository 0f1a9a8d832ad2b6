"""Offline audit client.

Returns a fixed, well-formed audit reply without any network access. Used
for local runs and tests, and as the template for new provider adapters:
implement BaseAuditClient and register the provider in AuditorFactory.
"""

import json
from typing import ClassVar

from compliance_audit.analysis.client_base import BaseAuditClient


class ExampleClientAdapter(BaseAuditClient):
    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "totalFindings": 2,
        "highRisk": 0,
        "mediumRisk": 1,
        "compliant": 1,
        "opinion": "qualified",
        "findings": [
            {
                "severity": "medium",
                "title": "Incomplete record of delegations",
                "regulation": "PFMA Section 44(1)",
                "description": "Delegations of authority are referenced but not documented.",
                "evidence": None,
                "recommendation": "Maintain a signed register of all delegations.",
            },
            {
                "severity": "compliant",
                "title": "Annual financial statements submitted",
                "regulation": "PFMA Section 40(1)(c)",
                "description": "Statements were submitted within the prescribed period.",
                "evidence": None,
                "recommendation": None,
            },
        ],
    }

    def __init__(self, response: str | None = None) -> None:
        self._response = response if response is not None else json.dumps(self.DEFAULT_RESPONSE)
        self.prompts: list[str] = []

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt
        self.prompts.append(user_prompt)
        return self._response
