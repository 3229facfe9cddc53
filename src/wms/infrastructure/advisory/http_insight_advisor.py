"""HTTP client for the external inventory advisory service.

POSTs the product snapshot as JSON and expects back a JSON list of
``{"type", "message", "action"?}`` objects.
"""

from __future__ import annotations

import httpx

from wms.application.insights import (
    INSIGHT_TYPES,
    AdvisorUnavailableError,
    Insight,
    InsightAdvisor,
)


class HttpInsightAdvisor(InsightAdvisor):

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def analyze(self, snapshot: dict) -> list[Insight]:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(self._url, json=snapshot)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise AdvisorUnavailableError(f"Advisor request failed: {exc}") from exc
        except ValueError as exc:
            raise AdvisorUnavailableError("Advisor returned invalid JSON") from exc

        return self._parse(data)

    @staticmethod
    def _parse(data: object) -> list[Insight]:
        if not isinstance(data, list):
            raise AdvisorUnavailableError("Advisor response must be a JSON list")
        insights: list[Insight] = []
        for item in data:
            if not isinstance(item, dict) or item.get("type") not in INSIGHT_TYPES:
                raise AdvisorUnavailableError(f"Malformed insight: {item!r}")
            insights.append(
                Insight(
                    type=item["type"],
                    message=str(item.get("message", "")),
                    action=item.get("action"),
                )
            )
        return insights
