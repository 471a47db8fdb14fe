"""Federated GraphQL schema for the fluorescence scan subgraph."""

import strawberry
from strawberry.schema.config import StrawberryConfig

from fluorescence_scan.graphql.entities import FluorescenceScan, Session


@strawberry.type
class Query:
    """The root query of the service.

    Session references are resolved through the federation ``_entities`` field.
    """


def build_schema() -> strawberry.federation.Schema:
    """Compile the read-only federated schema."""
    return strawberry.federation.Schema(
        query=Query,
        types=[Session, FluorescenceScan],
        federation_version="2.7",
        config=StrawberryConfig(auto_camel_case=False),
    )


schema = build_schema()
