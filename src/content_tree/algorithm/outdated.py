"""Outdated-translation detection via source-text hashes.

A translation store records, next to each translated value, the MD5 hash of
the source text it was made from.  When the source text changes, the
recorded hash no longer matches and the translation is flagged outdated.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any

from content_tree.algorithm.config import OverlayConfig
from content_tree.algorithm.extractor import TextExtractor
from content_tree.result import OutdatedStatus

__all__ = ["check_outdated", "compute_source_hash"]


def compute_source_hash(text: Any) -> str:
    """Return the MD5 hex digest of ``text``, or "" for empty input."""
    if not text:
        return ""
    return hashlib.md5(str(text).encode("utf-8")).hexdigest()  # noqa: S324


def _stored_hash(entry: Any) -> str | None:
    if isinstance(entry, Mapping):
        stored = entry.get("sourceHash", entry.get("source_hash"))
        return stored if isinstance(stored, str) else None
    return entry if isinstance(entry, str) else None


def check_outdated(
    page: Any,
    stored: Mapping[str, Any],
    config: OverlayConfig | None = None,
) -> dict[str, OutdatedStatus]:
    """Compare stored translation hashes with the page's current text.

    Args:
        page:   The source-language page.
        stored: Path -> stored source hash, or path -> mapping with a
                ``sourceHash`` key (as returned by a translation store).
        config: Extraction settings.  Defaults to ``OverlayConfig()``.

    Returns:
        One ``OutdatedStatus`` per translatable path of ``page``, in tree
        order.  Stored paths that no longer exist in the page are ignored.
    """
    extractor = TextExtractor(config if config is not None else OverlayConfig())
    results: dict[str, OutdatedStatus] = {}
    for path, extracted in extractor.extract(page).items():
        current_hash = compute_source_hash(extracted.value)
        if path not in stored:
            results[path] = OutdatedStatus(
                outdated=False, missing=True, current_hash=current_hash
            )
            continue
        stored_hash = _stored_hash(stored[path])
        results[path] = OutdatedStatus(
            outdated=stored_hash != current_hash,
            missing=False,
            current_hash=current_hash,
            stored_hash=stored_hash,
        )
    return results
