"""Options for ``hdiutil convert`` and the image format enumeration."""

from __future__ import annotations

from enum import Enum

from .create import Overwrite
from .flags import (
    BoolOption,
    ConvertFlag,
    CreateFlag,
    IntOption,
    StringOption,
    string_flag,
)


class ImageFormat(CreateFlag, Enum):
    """Disk image format identifier (``-format``).

    Accepted as the target format of ``convert`` and as the final format of
    ``create`` when a data source is given.
    """

    UDRW = "UDRW"
    UDRO = "UDRO"
    UDCO = "UDCO"
    UDZO = "UDZO"
    ULFO = "ULFO"
    ULMO = "ULMO"
    UDBZ = "UDBZ"
    UDTO = "UDTO"
    UDSP = "UDSP"
    UDSB = "UDSB"
    UFBI = "UFBI"
    UDRo = "UDRo"
    UDCo = "UDCo"
    RdWr = "RdWr"
    Rdxx = "Rdxx"
    ROCo = "ROCo"
    Rken = "Rken"
    DC42 = "DC42"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _FORMAT_DESCRIPTIONS[self]

    def encode(self) -> list[str]:
        return string_flag("format", self.value)

    def format_flag(self) -> list[str]:
        return self.encode()


_FORMAT_DESCRIPTIONS = {
    ImageFormat.UDRW: "UDIF read/write image",
    ImageFormat.UDRO: "UDIF read-only image",
    ImageFormat.UDCO: "UDIF ADC-compressed image",
    ImageFormat.UDZO: "UDIF zlib-compressed image",
    ImageFormat.ULFO: "UDIF lzfse-compressed image",
    ImageFormat.ULMO: "UDIF lzma-compressed image",
    ImageFormat.UDBZ: "UDIF bzip2-compressed image",
    ImageFormat.UDTO: "DVD/CD-R master for export",
    ImageFormat.UDSP: "SPARSE (grows with content)",
    ImageFormat.UDSB: "SPARSEBUNDLE (grows with content; bundle-backed)",
    ImageFormat.UFBI: "UDIF entire image with MD5 checksum",
    ImageFormat.UDRo: "UDIF read-only (obsolete format)",
    ImageFormat.UDCo: "UDIF compressed (obsolete format)",
    ImageFormat.RdWr: "NDIF read/write image (deprecated)",
    ImageFormat.Rdxx: "NDIF read-only image (deprecated)",
    ImageFormat.ROCo: "NDIF compressed image (deprecated)",
    ImageFormat.Rken: "NDIF compressed (obsolete format)",
    ImageFormat.DC42: "Disk Copy 4.2 image (obsolete format)",
}


class Align(IntOption, ConvertFlag):
    """Alignment in sectors. The default is 4 (2K)."""

    flag_name = "align"


class Pmap(BoolOption, ConvertFlag):
    """Add a partition map."""

    flag_name = "pmap"


class SegmentSize(StringOption, ConvertFlag):
    """Segment the output into pieces of the given size spec."""

    flag_name = "segmentSize"


class Tasks(IntOption, ConvertFlag):
    """Number of compression threads. Defaults to the active processor count."""

    flag_name = "tasks"


PMAP = Pmap()
OVERWRITE = Overwrite()
