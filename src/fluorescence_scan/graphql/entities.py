"""GraphQL entities exposed by the fluorescence scan subgraph."""

import logging
from datetime import UTC, datetime

import strawberry
from strawberry.federation.schema_directives import Key
from strawberry.types import Info

from fluorescence_scan.domain.scans import (
    FluorescenceScanRepository,
    XfeFluorescenceSpectrumRecord,
)
from fluorescence_scan.graphql.context import RequestContext

logger = logging.getLogger(__name__)

MAX_SESSION_ID = 2**31 - 1


class FederationKeyError(ValueError):
    """Raised when a federation representation carries an unusable session id."""


@strawberry.federation.type(
    name="FluorescenceScan",
    keys=[Key(fields="id", resolvable=False)],
    description="Represents XFEFluorescenceSpectrum table from the ISPyB database",
)
class FluorescenceScan:
    id: int = strawberry.field(
        description="An opaque unique identifier for the XFEFluorescenceSpectrum"
    )
    session_id: int = strawberry.field(
        description="An opaque unique identifier for a session"
    )
    jpeg_scan_file_full_path: str | None = strawberry.field(
        description="Full path of the scan file in jpeg format"
    )
    start_time: datetime | None = strawberry.field(
        description="Start time of the scan"
    )
    end_time: datetime | None = strawberry.field(description="End time of the scan")
    filename: str | None = strawberry.field(description="Scan file name")
    exposure_time: float | None = strawberry.field(description="Beam exposure time")
    axis_position: float | None = strawberry.field(description="Beam axis position")
    beam_transmission: float | None = strawberry.field(
        description="Amount of beam transmission"
    )
    scan_file_full_path: str | None = strawberry.field(
        description="Full path of the scan file"
    )
    energy: float | None = strawberry.field(
        description="Amount of energy from the beam"
    )
    beam_size_vertical: float | None = strawberry.field(
        description="Beam vertical size"
    )
    beam_size_horizontal: float | None = strawberry.field(
        description="Beam horizontal size"
    )

    @classmethod
    def from_record(cls, record: XfeFluorescenceSpectrumRecord) -> "FluorescenceScan":
        """Map a stored spectrum row onto the exposed entity."""
        return cls(
            id=record.xfe_fluorescence_spectrum_id,
            session_id=record.session_id,
            jpeg_scan_file_full_path=record.jpeg_scan_file_full_path,
            start_time=_as_utc(record.start_time),
            end_time=_as_utc(record.end_time),
            filename=record.filename,
            exposure_time=record.exposure_time,
            axis_position=record.axis_position,
            beam_transmission=record.beam_transmission,
            scan_file_full_path=record.scan_file_full_path,
            energy=record.energy,
            beam_size_vertical=record.beam_size_vertical,
            beam_size_horizontal=record.beam_size_horizontal,
        )


@strawberry.federation.type(
    name="Session",
    keys=["id"],
    description="A session owned by another subgraph, referenced by id",
)
class Session:
    id: int = strawberry.field(description="An opaque unique identifier for session")

    @classmethod
    def resolve_reference(cls, id: object) -> "Session":  # noqa: A002
        """Rebuild a session stub from a federation representation."""
        return cls(id=parse_session_id(id))

    @strawberry.field(
        description="Fetches all fluorescence scans recorded during the session"
    )
    async def fluorescence_scan(self, info: Info) -> list[FluorescenceScan]:
        context: RequestContext = info.context
        repository = context.get(FluorescenceScanRepository)
        records = await repository.list_for_session(self.id)
        logger.debug(
            "Fetched %d fluorescence scans for session %d", len(records), self.id
        )
        return [FluorescenceScan.from_record(record) for record in records]


def parse_session_id(raw: object) -> int:
    """Interpret a federation key value as a non-negative GraphQL Int session id."""
    if isinstance(raw, bool):
        raise FederationKeyError(f"Invalid Session id: {raw!r}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str) and raw.strip().isdigit():
        value = int(raw.strip())
    else:
        raise FederationKeyError(f"Invalid Session id: {raw!r}")
    if not 0 <= value <= MAX_SESSION_ID:
        raise FederationKeyError(f"Session id out of range: {value}")
    return value


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return value.replace(tzinfo=UTC)
