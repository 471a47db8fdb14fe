"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from botocore.client import BaseClient
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine

from fluorescence_scan.adapters.s3_storage import S3Bucket, create_s3_client
from fluorescence_scan.adapters.sqlalchemy_scan_repository import (
    SqlAlchemyFluorescenceScanRepository,
)
from fluorescence_scan.api.graphql_handler import GraphQLExecutor
from fluorescence_scan.config import Settings, async_database_url
from fluorescence_scan.domain.scans import FluorescenceScanRepository
from fluorescence_scan.graphql.schema import schema

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    scan_repository: FluorescenceScanRepository
    s3_client: BaseClient
    s3_bucket: S3Bucket
    executor: GraphQLExecutor
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    database_url = async_database_url(resolved_settings.database_url)
    logger.info("Connecting to database at %s", make_url(database_url).host)
    engine = create_async_engine(database_url, pool_pre_ping=True)
    s3_client = create_s3_client(resolved_settings)

    async def close_resources() -> None:
        await engine.dispose()
        s3_client.close()

    return AppContainer(
        settings=resolved_settings,
        scan_repository=SqlAlchemyFluorescenceScanRepository(engine),
        s3_client=s3_client,
        s3_bucket=S3Bucket(resolved_settings.s3_bucket),
        executor=schema,
        close_resources=close_resources,
    )
