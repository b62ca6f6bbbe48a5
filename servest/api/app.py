"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from servest.config import Settings, configure_logging, get_settings
from servest.engine import ENGINE_VERSION
from servest.exceptions import InvalidFrequencyError, InvalidTransitionError, ServestError
from servest.lifecycle import available_transitions, transition
from servest.models.enums import ProjectStatus
from servest.models.facilities import FacilitiesState  # noqa: TCH001 (FastAPI resolves at runtime)
from servest.models.housekeeping import HousekeepingState  # noqa: TCH001
from servest.models.retrofit import RetrofitState  # noqa: TCH001

if TYPE_CHECKING:
    from servest.engine import EstimationPipeline
    from servest.models.results import EstimationResult

logger = logging.getLogger(__name__)


class TransitionRequest(BaseModel):
    current: ProjectStatus
    target: ProjectStatus
    is_admin: bool = False


def create_app(
    *,
    settings: Settings | None = None,
    pipelines: dict[str, EstimationPipeline] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings; read from the environment when omitted.
    pipelines
        Optional pre-built pipelines keyed by variant name ("housekeeping",
        "facilities", "retrofit") for dependency injection (e.g. tests).
        Missing variants are created with the default factories on first use.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    app = FastAPI(title="Servest", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.settings = settings
    app.state.pipelines = dict(pipelines or {})

    def _get_pipeline(variant: str) -> EstimationPipeline:
        registry: dict[str, EstimationPipeline] = app.state.pipelines
        pipeline = registry.get(variant)
        if pipeline is not None:
            return pipeline
        from servest import factory

        creators = {
            "housekeeping": factory.create_housekeeping_pipeline,
            "facilities": factory.create_facilities_pipeline,
            "retrofit": factory.create_retrofit_pipeline,
        }
        pipeline = creators[variant]()
        registry[variant] = pipeline
        return pipeline

    def _respond(result: EstimationResult) -> dict[str, Any]:
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(
                currency=settings.currency, decimals=settings.currency_decimals
            ),
            "export_dict": result.to_export_dict(),
        }

    def _run(variant: str, state: BaseModel) -> dict[str, Any]:
        try:
            result = _get_pipeline(variant).estimate(state)
        except InvalidFrequencyError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ServestError as exc:
            logger.exception("Estimation error for %s", variant)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return _respond(result)

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate/{variant}
    # ------------------------------------------------------------------

    @app.post("/api/estimate/housekeeping")
    def estimate_housekeeping(state: HousekeepingState) -> dict[str, Any]:
        return _run("housekeeping", state)

    @app.post("/api/estimate/facilities")
    def estimate_facilities(state: FacilitiesState) -> dict[str, Any]:
        return _run("facilities", state)

    @app.post("/api/estimate/retrofit")
    def estimate_retrofit(state: RetrofitState) -> dict[str, Any]:
        return _run("retrofit", state)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        from servest.data.defaults import sample_housekeeping_state

        return _run("housekeeping", sample_housekeeping_state())

    # ------------------------------------------------------------------
    # POST /api/projects/transition
    # ------------------------------------------------------------------

    @app.post("/api/projects/transition")
    def project_transition(request: TransitionRequest) -> dict[str, Any]:
        try:
            status = transition(request.current, request.target, request.is_admin)
        except InvalidTransitionError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {
            "status": status.value,
            "available_transitions": [
                s.value for s in available_transitions(status, request.is_admin)
            ],
        }

    return app
