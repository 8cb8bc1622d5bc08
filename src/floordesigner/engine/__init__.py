"""Engine module for floor plan designs.

This module provides proportional scaling of template geometry and the
transient designer session built on top of it.
"""

from .scaling import ScaleFactors, compute_scale_factors, scale_template
from .session import DesignSession

__all__ = ["DesignSession", "ScaleFactors", "compute_scale_factors", "scale_template"]
