"""TranslationSession: language switching and translation saving for one page.

Wires the pure core (``diff`` / ``apply_overlay``) to a ``TranslationService``.
The session snapshots the page once, at construction, as the base-language
reference; every view it hands out is a fresh clone of that snapshot, so
the editor may mutate views freely.

The session never retries or cancels: if a caller abandons a language
switch (because a newer one superseded it) it simply drops the returned
page.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from content_tree.algorithm.config import OverlayConfig
from content_tree.algorithm.differ import TreeDiffer
from content_tree.algorithm.patcher import OverlayPatcher
from content_tree.api import restore_original
from content_tree.result import FieldChange
from content_tree.tree.nodes import clone_page

if TYPE_CHECKING:
    from content_tree.protocols import PageStore, TranslationService

__all__ = ["TranslationSession"]

logger = logging.getLogger(__name__)


class TranslationSession:
    """Editor-side state for translating one page.

    Example::

        from content_tree.backends import InMemoryTranslationService
        from content_tree.session import TranslationSession

        session = TranslationSession(page, content_id=7,
                                     service=InMemoryTranslationService())
        view = session.switch_language("fr")        # base clone, no overlay yet
        view[0]["items"][0]["content"] = "Bienvenue"
        session.save_translation(view, "fr")        # persists one FieldChange
        session.switch_language("fr")               # now carries "Bienvenue"
    """

    def __init__(
        self,
        page: Any,
        content_id: int,
        service: TranslationService,
        *,
        content_type: str = "page",
        base_language: str = "en",
        config: OverlayConfig | None = None,
    ) -> None:
        """Snapshot ``page`` as the base and bind the translation service.

        Args:
            page:          The base-language page as loaded.  Copied; later
                mutations of the caller's page do not affect the session.
            content_id:    Identifier of the page in the translation store.
            service:       A ``TranslationService``-conformant object.
            content_type:  Content type sent to the service.  Default "page".
            base_language: Language code of ``page`` itself.  Default "en".
            config:        Extraction settings for diffing.
        """
        self._base = clone_page(page)
        self._content_id = content_id
        self._service = service
        self._content_type = content_type
        self._base_language = base_language
        self._config = config if config is not None else OverlayConfig()
        self._language = base_language

    @classmethod
    def from_store(
        cls,
        store: PageStore,
        content_id: int,
        service: TranslationService,
        **kwargs: Any,
    ) -> TranslationSession:
        """Load the page from ``store`` and open a session on it."""
        return cls(store.load(content_id), content_id, service, **kwargs)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def base(self) -> list[Any]:
        """A fresh clone of the base snapshot."""
        return clone_page(self._base)

    @property
    def language(self) -> str:
        """Language of the view most recently handed out."""
        return self._language

    @property
    def base_language(self) -> str:
        return self._base_language

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def switch_language(self, language: str) -> list[Any]:
        """Return the page as seen in ``language``.

        The base language yields a clone of the snapshot.  Any other
        language fetches its overlay and applies it to a clone; paths the
        overlay does not cover keep their base text.
        """
        if language == self._base_language:
            self._language = language
            return clone_page(self._base)

        overlay = self._service.fetch_overlay(
            self._content_type, self._content_id, language
        )
        logger.debug(
            "fetched %d overlay entries for %s:%s/%s",
            len(overlay),
            self._content_type,
            self._content_id,
            language,
        )
        view = OverlayPatcher().apply(self._base, overlay)
        self._language = language
        return view

    def pending_changes(self, current: Any) -> dict[str, FieldChange]:
        """Return the leaves of ``current`` that differ from the base."""
        return TreeDiffer(self._config).diff(current, self._base)

    def save_translation(self, current: Any, language: str) -> dict[str, FieldChange]:
        """Persist the differences between ``current`` and the base.

        Nothing is sent when there are no changes.  Saving into the base
        language is refused because the base is not an overlay.

        Returns:
            The changes that were sent.

        Raises:
            ValueError: If ``language`` is the base language.
        """
        if language == self._base_language:
            msg = f"cannot save a translation into the base language {language!r}"
            raise ValueError(msg)

        changes = self.pending_changes(current)
        if not changes:
            logger.debug("no translation changes for %s/%s", self._content_id, language)
            return changes

        fields = {path: change.to_payload() for path, change in changes.items()}
        self._service.save_translations(
            self._content_type, self._content_id, language, fields
        )
        logger.info(
            "saved %d translated fields for %s:%s/%s",
            len(fields),
            self._content_type,
            self._content_id,
            language,
        )
        return changes

    def restore_original(self, current: Any) -> list[Any]:
        """Return ``current`` with every base-language text written back."""
        self._language = self._base_language
        return restore_original(current, self._base, config=self._config)
