"""UI components package."""

from .filter_panel import render_filter_panel
from .seed_card import render_results_section
from .pager import render_pager
from .data_panel import render_data_panel
from .debug_panel import render_debug_panel

__all__ = [
    "render_filter_panel",
    "render_results_section",
    "render_pager",
    "render_data_panel",
    "render_debug_panel",
]
