"""Template store and template service.

A store answers two queries over read-only template records: the most
recent template of a BHK type, and every template matching optional BHK
and property type filters, most recent first.

The service wraps a store and applies an explicitly injected fallback
dataset to list queries when the store fails or has nothing to offer.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence

from ..core.errors import TemplateStoreError
from ..core.model import Template
from .parser import load_templates

LOGGER = logging.getLogger(__name__)

FALLBACK_RESOURCE = "templates.json"


class TemplateStore(Protocol):
    """Protocol for template sources."""

    def latest_by_bhk(self, bhk_type: str) -> Optional[Template]:
        """Return the most recently created template of a BHK type.

        Raises:
            TemplateStoreError: If the store cannot be read.
        """
        ...

    def find(
        self, bhk_type: Optional[str] = None, property_type: Optional[str] = None
    ) -> List[Template]:
        """Return templates matching the filters, newest first.

        Raises:
            TemplateStoreError: If the store cannot be read.
        """
        ...


def filter_templates(
    templates: Iterable[Template],
    bhk_type: Optional[str] = None,
    property_type: Optional[str] = None,
) -> List[Template]:
    """Filter templates by BHK and property type and sort newest first."""
    matches = [
        template
        for template in templates
        if (bhk_type is None or template.bhk_type == bhk_type)
        and (property_type is None or template.property_type == property_type)
    ]
    return sorted(matches, key=lambda template: template.created_at, reverse=True)


class InMemoryTemplateStore:
    """Template store over an in-memory sequence of templates."""

    def __init__(self, templates: Sequence[Template] = ()):
        self._templates = tuple(templates)

    def latest_by_bhk(self, bhk_type: str) -> Optional[Template]:
        matches = filter_templates(self._templates, bhk_type=bhk_type)
        return matches[0] if matches else None

    def find(
        self, bhk_type: Optional[str] = None, property_type: Optional[str] = None
    ) -> List[Template]:
        return filter_templates(self._templates, bhk_type, property_type)


class JsonTemplateStore:
    """Template store backed by a JSON file.

    The file is read lazily on first use and cached; call ``reload`` to
    pick up changes.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._templates: Optional[List[Template]] = None

    def _load(self) -> List[Template]:
        if self._templates is None:
            self._templates = load_templates(self.path)
            LOGGER.debug("Loaded %d templates from %s", len(self._templates), self.path)
        return self._templates

    def reload(self) -> None:
        self._templates = None

    def latest_by_bhk(self, bhk_type: str) -> Optional[Template]:
        matches = filter_templates(self._load(), bhk_type=bhk_type)
        return matches[0] if matches else None

    def find(
        self, bhk_type: Optional[str] = None, property_type: Optional[str] = None
    ) -> List[Template]:
        return filter_templates(self._load(), bhk_type, property_type)


def default_fallback_templates() -> List[Template]:
    """Load the fallback templates shipped with the package."""
    resource = resources.files("floordesigner.data").joinpath(FALLBACK_RESOURCE)
    with resources.as_file(resource) as path:
        return load_templates(path)


class TemplateService:
    """Template queries with an explicit fallback dataset.

    Attributes:
        store: The primary template store.
        fallback: Templates served by ``list_templates`` when the store
            fails or returns no match. Empty means no fallback.
    """

    def __init__(self, store: TemplateStore, fallback: Sequence[Template] = ()):
        self.store = store
        self.fallback = tuple(fallback)

    def list_templates(
        self, bhk_type: Optional[str] = None, property_type: Optional[str] = None
    ) -> List[Template]:
        """List templates matching the filters, newest first.

        Falls back to the injected dataset, filtered the same way, when the
        store raises ``TemplateStoreError`` or has no match.
        """
        try:
            templates = self.store.find(bhk_type, property_type)
        except TemplateStoreError as e:
            LOGGER.warning("Template store failed, serving fallback templates: %s", e)
            return filter_templates(self.fallback, bhk_type, property_type)

        if not templates and self.fallback:
            LOGGER.info(
                "No stored templates for bhkType=%s propertyType=%s, serving fallback",
                bhk_type, property_type,
            )
            return filter_templates(self.fallback, bhk_type, property_type)
        return templates

    def latest_for_bhk(self, bhk_type: str) -> Optional[Template]:
        """Return the latest template of a BHK type, or None.

        Never falls back; store failures propagate.

        Raises:
            TemplateStoreError: If the store cannot be read.
        """
        return self.store.latest_by_bhk(bhk_type)
