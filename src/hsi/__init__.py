"""Host Security ID attributes and their wire, JSON and text encodings."""

from hsi.core.attribute import HsiAttr
from hsi.core.flags import HsiAttrFlag
from hsi.errors import HsiError, PreconditionViolation, SkippedBatchElement, UnrecognizedWireShape

__all__ = [
    "HsiAttr",
    "HsiAttrFlag",
    "HsiError",
    "PreconditionViolation",
    "SkippedBatchElement",
    "UnrecognizedWireShape",
]
