"""Transient designer state.

A ``DesignSession`` holds what a user is currently editing: the selected
BHK type and outline shape, the overall specifications and the template
the design is derived from. Template fetches run off the event loop and
the most recent request always wins; a slower, older response that
arrives late is dropped.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Any, Optional, Tuple

from ..core.model import Design, DesignSpecifications, Template
from ..io.store import TemplateService
from ..layout import ShapeLayout, build_shape_layout
from .scaling import scale_template

LOGGER = logging.getLogger(__name__)


class DesignSession:
    """Designer state with last-request-wins template loading.

    Attributes:
        service: Template service used to fetch base templates.
        specifications: Current overall specifications.
        bhk_type: Currently selected BHK type.
        shape: Currently selected outline shape.
        template: Base template of the design, None for an empty canvas.
        loading: True while a template request is in flight.
    """

    def __init__(
        self,
        service: TemplateService,
        specifications: Optional[DesignSpecifications] = None,
        bhk_type: str = "2BHK",
        shape: str = "Rectangular",
    ):
        self.service = service
        self.specifications = specifications or DesignSpecifications()
        self.bhk_type = bhk_type
        self.shape = shape
        self.template: Optional[Template] = None
        self.loading = False
        self._latest_token = 0
        self._cache_key: Optional[Tuple[Optional[str], float, float]] = None
        self._cached_design: Optional[Design] = None

    def begin_template_request(self) -> int:
        """Issue a new request token; earlier tokens become stale."""
        self._latest_token += 1
        self.loading = True
        return self._latest_token

    def resolve_template_request(self, token: int, template: Optional[Template]) -> bool:
        """Apply a template response if its request is still the latest.

        Returns:
            True if the response was applied, False if it was stale.
        """
        if token != self._latest_token:
            LOGGER.debug(
                "Discarding stale template response (token %d, latest %d)",
                token, self._latest_token,
            )
            return False
        self.template = template
        self.loading = False
        return True

    async def load_template(self, bhk_type: str) -> Optional[Template]:
        """Select a BHK type and fetch its latest template.

        The blocking store call runs in a worker thread. If another load
        starts before this one finishes, this result is discarded.

        Returns:
            The session's current template after the call.
        """
        self.bhk_type = bhk_type
        token = self.begin_template_request()
        try:
            template = await asyncio.to_thread(self.service.latest_for_bhk, bhk_type)
        except Exception:
            if token == self._latest_token:
                self.loading = False
            raise
        if self.resolve_template_request(token, template) and template is None:
            LOGGER.info("No template found for %s, starting from an empty canvas", bhk_type)
        return self.template

    def update_specifications(self, **changes: Any) -> DesignSpecifications:
        """Replace fields of the current specifications.

        Raises:
            ValueError: If an overall dimension is not positive.
        """
        specifications = replace(self.specifications, **changes)
        if specifications.overall_width <= 0 or specifications.overall_height <= 0:
            raise ValueError(
                "Overall dimensions must be positive, got "
                f"{specifications.overall_width} x {specifications.overall_height}"
            )
        self.specifications = specifications
        return specifications

    @property
    def design(self) -> Design:
        """The current design, rescaled only when its size or template changes."""
        specs = self.specifications
        template_id = self.template.id if self.template is not None else None
        key = (template_id, specs.overall_width, specs.overall_height)

        if key != self._cache_key or self._cached_design is None:
            if self.template is None:
                self._cached_design = Design(rooms=(), specifications=specs)
            else:
                self._cached_design = scale_template(
                    self.template, specs.overall_width, specs.overall_height, specs
                )
                LOGGER.debug(
                    "Rescaled template %s to %.2f x %.2f",
                    template_id, specs.overall_width, specs.overall_height,
                )
            self._cache_key = key

        if self._cached_design.specifications != specs:
            # Unit, wall or ceiling change: same geometry, new specifications
            self._cached_design = replace(self._cached_design, specifications=specs)
        return self._cached_design

    def shape_layout(self) -> ShapeLayout:
        """Lay out the required rooms for the selected shape and size."""
        return build_shape_layout(
            self.shape, self.specifications.overall_width, self.specifications.overall_height
        )
