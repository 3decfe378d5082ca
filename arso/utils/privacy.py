"""Utilities for hiding upstream station identifiers behind opaque tokens."""
import hashlib


def obfuscate_station_id(raw_id: str) -> str:
    """
    Derive the opaque identifier used in lookup URLs.

    The same raw identifier always maps to the same 32 character lowercase
    hex token, so a station keeps its URL across fetches. MD5 is used for
    stability and URL safety only; this is not a security boundary.
    """
    return hashlib.md5(raw_id.encode("utf-8")).hexdigest()


def station_lookup_path(token: str) -> str:
    """Path of the per-station lookup endpoint for an opaque identifier."""
    return f"/vreme/{token}"
