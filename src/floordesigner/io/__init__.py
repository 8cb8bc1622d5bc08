"""Input/output for floor plan templates and designs."""

from .parser import load_templates, save_design, template_from_dict
from .store import (
    InMemoryTemplateStore,
    JsonTemplateStore,
    TemplateService,
    TemplateStore,
    default_fallback_templates,
    filter_templates,
)

__all__ = [
    "InMemoryTemplateStore",
    "JsonTemplateStore",
    "TemplateService",
    "TemplateStore",
    "default_fallback_templates",
    "filter_templates",
    "load_templates",
    "save_design",
    "template_from_dict",
]
