"""Health Probe — liveness endpoint plus current store sizes."""

from fastapi import APIRouter, Depends, status

from eventgraph.api.dependencies import get_graph
from eventgraph.core.operations import GraphOperations

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check(graph: GraphOperations = Depends(get_graph)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "eventgraph-api",
        "records": graph.state.counts,
    }
