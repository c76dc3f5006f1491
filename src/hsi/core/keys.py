"""Result keys shared by the wire, JSON and text encodings.

These names are owned by the daemon's result schema and must not change.
"""

KEY_APPSTREAM_ID = "AppstreamId"
KEY_NAME = "Name"
KEY_SUMMARY = "Summary"
KEY_URI = "Uri"
KEY_CHECKSUM = "Checksum"  # carries the obsoletes list
KEY_TRUST_FLAGS = "TrustFlags"
KEY_HSI_NUMBER = "HsiNumber"
KEY_FLAGS = "Flags"  # JSON and text only; the wire uses TrustFlags

__all__ = [
    "KEY_APPSTREAM_ID",
    "KEY_CHECKSUM",
    "KEY_FLAGS",
    "KEY_HSI_NUMBER",
    "KEY_NAME",
    "KEY_SUMMARY",
    "KEY_TRUST_FLAGS",
    "KEY_URI",
]
