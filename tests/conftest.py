"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from fluorescence_scan.adapters.s3_storage import S3Bucket, create_s3_client
from fluorescence_scan.config import Settings
from fluorescence_scan.containers import AppContainer
from fluorescence_scan.domain.scans import (
    FluorescenceScanRepository,
    XfeFluorescenceSpectrumRecord,
)
from fluorescence_scan.graphql.schema import schema


@dataclass
class InMemoryFluorescenceScanRepository(FluorescenceScanRepository):
    """In-memory scan repository for tests."""

    records: list[XfeFluorescenceSpectrumRecord] = field(default_factory=list)
    queried_sessions: list[int] = field(default_factory=list)

    async def list_for_session(
        self, session_id: int
    ) -> list[XfeFluorescenceSpectrumRecord]:
        self.queried_sessions.append(session_id)
        return [record for record in self.records if record.session_id == session_id]


@dataclass
class FailingFluorescenceScanRepository(FluorescenceScanRepository):
    """Repository whose reads always fail."""

    error: Exception

    async def list_for_session(
        self, session_id: int
    ) -> list[XfeFluorescenceSpectrumRecord]:
        raise self.error


def make_record(
    scan_id: int, session_id: int, **overrides: object
) -> XfeFluorescenceSpectrumRecord:
    values: dict[str, object] = {
        "xfe_fluorescence_spectrum_id": scan_id,
        "session_id": session_id,
        "jpeg_scan_file_full_path": f"/dls/i03/data/scan_{scan_id}.jpg",
        "start_time": datetime(2024, 3, 1, 9, 30, 0),
        "end_time": datetime(2024, 3, 1, 9, 31, 15),
        "filename": f"scan_{scan_id}.dat",
        "exposure_time": 0.5,
        "axis_position": 90.0,
        "beam_transmission": 12.5,
        "scan_file_full_path": f"/dls/i03/data/scan_{scan_id}.dat",
        "energy": 12700.0,
        "beam_size_vertical": 20.0,
        "beam_size_horizontal": 50.0,
    }
    values.update(overrides)
    return XfeFluorescenceSpectrumRecord(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        s3_bucket="fluorescence-scans",
        s3_endpoint_url="http://localhost:9000",
        s3_access_key_id="access-key",
        s3_secret_access_key="secret-key",
        s3_force_path_style=True,
        s3_region="eu-west-2",
    )


@pytest.fixture
def scan_repository() -> InMemoryFluorescenceScanRepository:
    return InMemoryFluorescenceScanRepository(
        records=[
            make_record(1, 42),
            make_record(2, 42, filename="second.dat", start_time=None),
            make_record(3, 7),
        ]
    )


@pytest.fixture
def container(
    settings: Settings, scan_repository: InMemoryFluorescenceScanRepository
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        scan_repository=scan_repository,
        s3_client=create_s3_client(settings),
        s3_bucket=S3Bucket(settings.s3_bucket),
        executor=schema,
        close_resources=close_resources,
    )
