"""SQLAlchemy-backed fluorescence scan repository."""

from dataclasses import dataclass

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    Integer,
    MetaData,
    String,
    Table,
    select,
)
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncEngine

from fluorescence_scan.domain.scans import (
    FluorescenceScanRepository,
    XfeFluorescenceSpectrumRecord,
)

metadata = MetaData()

xfe_fluorescence_spectrum = Table(
    "XFEFluorescenceSpectrum",
    metadata,
    Column(
        "xfeFluorescenceSpectrumId",
        Integer,
        key="xfe_fluorescence_spectrum_id",
        primary_key=True,
    ),
    Column("sessionId", Integer, key="session_id", nullable=False, index=True),
    Column("jpegScanFileFullPath", String(255), key="jpeg_scan_file_full_path"),
    Column("startTime", DateTime, key="start_time"),
    Column("endTime", DateTime, key="end_time"),
    Column("filename", String(255), key="filename"),
    Column("exposureTime", Float, key="exposure_time"),
    Column("axisPosition", Float, key="axis_position"),
    Column("beamTransmission", Float, key="beam_transmission"),
    Column("scanFileFullPath", String(255), key="scan_file_full_path"),
    Column("energy", Float, key="energy"),
    Column("beamSizeVertical", Float, key="beam_size_vertical"),
    Column("beamSizeHorizontal", Float, key="beam_size_horizontal"),
)


@dataclass
class SqlAlchemyFluorescenceScanRepository(FluorescenceScanRepository):
    """Reads XFEFluorescenceSpectrum rows through a pooled async engine."""

    engine: AsyncEngine

    async def list_for_session(
        self, session_id: int
    ) -> list[XfeFluorescenceSpectrumRecord]:
        """Return all scans whose owning session matches ``session_id``."""
        query = select(
            *(column.label(column.key) for column in xfe_fluorescence_spectrum.c)
        ).where(xfe_fluorescence_spectrum.c.session_id == session_id)
        async with self.engine.connect() as connection:
            result = await connection.execute(query)
            rows = result.mappings().all()
        return [_parse_row(row) for row in rows]


def _parse_row(row: RowMapping) -> XfeFluorescenceSpectrumRecord:
    return XfeFluorescenceSpectrumRecord(
        xfe_fluorescence_spectrum_id=row["xfe_fluorescence_spectrum_id"],
        session_id=row["session_id"],
        jpeg_scan_file_full_path=row["jpeg_scan_file_full_path"],
        start_time=row["start_time"],
        end_time=row["end_time"],
        filename=row["filename"],
        exposure_time=row["exposure_time"],
        axis_position=row["axis_position"],
        beam_transmission=row["beam_transmission"],
        scan_file_full_path=row["scan_file_full_path"],
        energy=row["energy"],
        beam_size_vertical=row["beam_size_vertical"],
        beam_size_horizontal=row["beam_size_horizontal"],
    )
