"""Exceptions raised by the floor designer."""


class FloorDesignerError(Exception):
    """Base class for floor designer errors."""

    pass


class LayoutError(FloorDesignerError, ValueError):
    """Raised when a footprint cannot be laid out (e.g. too small for padding)."""

    pass


class InvalidLayout(LayoutError):
    """Raised when a generated layout violates layout invariants.

    A layout violation means the static per-shape table disagrees with the
    room catalogue; it is a design-time bug, not a runtime condition.
    """

    def __init__(self, issues):
        self.issues = list(issues)
        details = "; ".join(issue.message for issue in self.issues)
        super().__init__(f"Layout validation failed: {details}")


class TemplateStoreError(FloorDesignerError):
    """Raised when the template store cannot be read."""

    pass


class TemplateFormatError(TemplateStoreError, ValueError):
    """Raised when a template record is malformed."""

    pass
