"""Request handler running GraphQL documents with per-request context."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from botocore.client import BaseClient
from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import ValidationError
from strawberry.types import ExecutionResult

from fluorescence_scan.adapters.s3_storage import S3Bucket
from fluorescence_scan.api.graphql_models import GraphQLRequestBody
from fluorescence_scan.domain.scans import FluorescenceScanRepository
from fluorescence_scan.graphql.context import build_request_context

logger = logging.getLogger(__name__)


class GraphQLExecutor(Protocol):
    """Anything able to execute a GraphQL document against a compiled schema."""

    async def execute(
        self,
        query: str | None,
        variable_values: dict[str, Any] | None = None,
        context_value: Any | None = None,
        root_value: Any | None = None,
        operation_name: str | None = None,
    ) -> ExecutionResult:
        """Execute a document and return data alongside any field errors."""


@dataclass
class GraphQLHandler:
    """Parses GraphQL requests and executes them with the request context attached."""

    executor: GraphQLExecutor
    database: FluorescenceScanRepository
    s3_client: BaseClient
    s3_bucket: S3Bucket

    async def __call__(self, request: Request) -> Response:
        """Handle a single GraphQL POST request."""
        body = await request.body()
        try:
            document = GraphQLRequestBody.model_validate_json(body)
        except ValidationError as exc:
            logger.warning("Rejected malformed GraphQL request body")
            return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

        result = await self.executor.execute(
            document.query,
            variable_values=document.variables,
            context_value=build_request_context(
                self.database, self.s3_client, self.s3_bucket
            ),
            operation_name=document.operation_name,
        )
        return JSONResponse(serialize_result(result))


def serialize_result(result: ExecutionResult) -> dict[str, object]:
    """Convert an execution result into the GraphQL response envelope."""
    payload: dict[str, object] = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]
    if result.extensions:
        payload["extensions"] = result.extensions
    return payload
