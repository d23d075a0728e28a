"""Route Dependencies — hands each request the app-owned GraphOperations."""

from fastapi import Request

from eventgraph.core.operations import GraphOperations


def get_graph(request: Request) -> GraphOperations:
    return request.app.state.graph
