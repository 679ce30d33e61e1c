"""Montagem das views JSON de cada aba (substitui a renderização da UI)."""

from __future__ import annotations

from typing import Any

from bionic.application.concierge import ConciergeSession
from bionic.application.marketing import MarketingGenerator
from bionic.application.propensity import PropensityRanker
from bionic.application.workspace import Workspace
from bionic.domain.enums import TAB_LABELS, LeadSortField, Tab
from bionic.domain.results import WorkflowResult


def _dump(model: Any) -> dict[str, Any] | None:
    if model is None:
        return None
    return model.model_dump(by_alias=True, mode="json")


def tabs_view() -> list[dict[str, str]]:
    return [{"id": tab.value, "label": TAB_LABELS[tab]} for tab in Tab]


def workspace_view(workspace: Workspace) -> dict[str, Any]:
    return {
        "workspace_id": workspace.workspace_id,
        "active_tab": workspace.active_tab.value,
        "tabs": tabs_view(),
    }


def concierge_view(session: ConciergeSession) -> dict[str, Any]:
    return {
        "state": session.state.value,
        "messages": [_dump(message) for message in session.messages],
        "qualified_lead": _dump(session.qualified_lead),
        "error": session.last_error,
    }


def marketing_view(generator: MarketingGenerator) -> dict[str, Any]:
    image = generator.selected_image
    return {
        "is_generating": generator.is_generating,
        "content": _dump(generator.content),
        "copy_error": generator.copy_error,
        "image": (
            None
            if image is None
            else {
                "image_id": image.image_id,
                "mime_type": image.mime_type,
                "size_bytes": image.size_bytes,
            }
        ),
        "is_analyzing": generator.is_analyzing,
        "analysis": _dump(generator.current_analysis),
        "analysis_error": generator.analysis_error,
    }


def hunter_view(
    ranker: PropensityRanker,
    sort_by: LeadSortField | None = None,
    descending: bool = False,
) -> dict[str, Any]:
    return {
        "has_analyzed": ranker.has_analyzed,
        "is_analyzing": ranker.is_analyzing,
        "error": ranker.last_error,
        "high_propensity": [_dump(lead) for lead in ranker.high_propensity_leads()],
        "leads": [_dump(lead) for lead in ranker.sorted_leads(sort_by, descending)],
    }


def result_view(result: WorkflowResult[Any]) -> dict[str, Any]:
    return {"status": result.status.value, "error": result.error}
