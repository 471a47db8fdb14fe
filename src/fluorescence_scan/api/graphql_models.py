"""Pydantic models for GraphQL-over-HTTP payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphQLRequestBody(BaseModel):
    """GraphQL request document posted by clients and the federation router."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")
