"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from strawberry.http.ides import get_graphql_ide_html

from fluorescence_scan.api.graphql_handler import GraphQLHandler
from fluorescence_scan.app_logging import configure_logging
from fluorescence_scan.containers import AppContainer

GRAPHQL_ENDPOINT = "/"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    graphql_handler = GraphQLHandler(
        executor=container.executor,
        database=container.scan_repository,
        s3_client=container.s3_client,
        s3_bucket=container.s3_bucket,
    )
    app.add_api_route(
        GRAPHQL_ENDPOINT,
        graphql_handler,
        methods=["POST"],
        include_in_schema=False,
    )

    @app.get(GRAPHQL_ENDPOINT, response_class=HTMLResponse, include_in_schema=False)
    async def graphiql() -> HTMLResponse:
        """Interactive GraphiQL explorer for the subgraph."""
        return HTMLResponse(get_graphql_ide_html(graphql_ide="graphiql"))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
