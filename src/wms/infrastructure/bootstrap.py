"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from wms.application.insights import InsightAdvisor
from wms.infrastructure.advisory.http_insight_advisor import HttpInsightAdvisor
from wms.infrastructure.config import Settings, get_settings
from wms.infrastructure.persistence.json_ledger_store import JsonLedgerStore
from wms.infrastructure.persistence.json_user_repository import JsonUserRepository


def ledger_store(settings: Settings | None = None) -> JsonLedgerStore:
    settings = settings or get_settings()
    return JsonLedgerStore(settings.data_dir, seed_demo_data=settings.seed_demo_data)


def user_repository(settings: Settings | None = None) -> JsonUserRepository:
    settings = settings or get_settings()
    return JsonUserRepository(settings.data_dir / "users.json")


def insight_advisor(settings: Settings | None = None) -> InsightAdvisor | None:
    settings = settings or get_settings()
    if not settings.advisor_url:
        return None
    return HttpInsightAdvisor(settings.advisor_url, timeout=settings.advisor_timeout)
