"""Domain models for fluorescence scans."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class XfeFluorescenceSpectrumRecord:
    """Represents a row of the ISPyB XFEFluorescenceSpectrum table.

    Timestamps are naive, as stored by the database.
    """

    xfe_fluorescence_spectrum_id: int
    session_id: int
    jpeg_scan_file_full_path: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    filename: str | None = None
    exposure_time: float | None = None
    axis_position: float | None = None
    beam_transmission: float | None = None
    scan_file_full_path: str | None = None
    energy: float | None = None
    beam_size_vertical: float | None = None
    beam_size_horizontal: float | None = None


class FluorescenceScanRepository(Protocol):
    """Read interface over stored fluorescence scans."""

    async def list_for_session(
        self, session_id: int
    ) -> list[XfeFluorescenceSpectrumRecord]:
        """Return every scan recorded against a session."""
