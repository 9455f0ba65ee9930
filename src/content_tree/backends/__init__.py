"""Backends subpackage for content-tree.

The base install provides the in-memory ``InMemoryTranslationService`` and
``InMemoryPageStore``.  The REST-backed translation service is available via
an extra:

    pip install content-tree[http]   # HttpTranslationService (httpx + tenacity)

All backends satisfy the ``TranslationService`` / ``PageStore`` Protocols
structurally.  ``HttpTranslationService`` imports its dependencies lazily,
on instantiation, so importing it is always safe.
"""

from content_tree.backends.http import HttpTranslationService
from content_tree.backends.memory import InMemoryPageStore, InMemoryTranslationService

__all__ = ["HttpTranslationService", "InMemoryPageStore", "InMemoryTranslationService"]
