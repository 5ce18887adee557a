"""FastAPI application exposing the field analysis over HTTP."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from figdict import __version__
from figdict.config import AppConfig
from figdict.errors import ConfigurationError, FetchError, NotFoundError
from figdict.export.formatters import text_layer_to_dict
from figdict.ingestion.tree import collect_text_leaves
from figdict.models import TargetSelector
from figdict.pipeline import analyze_document, root_for_selector

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="FigDict", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class AnalyzePayload(BaseModel):
    document: Dict[str, Any] | None = None
    nodes: Dict[str, Any] | None = None
    target_type: str = "file"
    target_name: str | None = None
    target_id: str | None = None


def _selector(payload: AnalyzePayload) -> TargetSelector:
    config = AppConfig(
        target_type=payload.target_type,
        target_name=payload.target_name,
        target_id=payload.target_id,
    )
    try:
        return config.selector()
    except ConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _figma_payload(payload: AnalyzePayload) -> Dict[str, Any]:
    return payload.model_dump(include={"document", "nodes"}, exclude_none=True)


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/analyze")
async def analyze(payload: AnalyzePayload) -> dict[str, Any]:
    """Classify the text layers of a posted Figma document."""
    selector = _selector(payload)
    try:
        result = analyze_document(_figma_payload(payload), selector)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except FetchError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    fields: List[dict[str, Any]] = [
        {"key": key, **field.to_dict()} for key, field in result.sorted_fields()
    ]
    return {
        "target": {"id": result.target.id, "name": result.target.name, "type": result.target.type},
        "text_layer_count": len(result.text_layers),
        "fields": fields,
    }


@app.post("/text-layers")
async def text_layers(payload: AnalyzePayload) -> dict[str, Any]:
    """List the text layers of the selected part of a posted document."""
    selector = _selector(payload)
    try:
        root = root_for_selector(_figma_payload(payload), selector)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except FetchError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    leaves = collect_text_leaves(root)
    return {"count": len(leaves), "text_layers": [text_layer_to_dict(leaf) for leaf in leaves]}
