"""
Prometheus Metrics Endpoint.

PURPOSE:
    Expose /metrics for the Prometheus scraper.

DATA FLOW:
    observability/metrics.py         This file                    Observability Stack
    ────────────────────────         ─────────                    ───────────────────
    Define & record metrics ──────►  /metrics endpoint ──────────► Prometheus ──► Grafana

    Test with: curl http://localhost:8000/metrics
"""

from fastapi import APIRouter, Response
from src.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Return use case event, error and latency metrics in Prometheus text format."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
