"""Document exports for prop listings."""

from .pdf import render_props_pdf

__all__ = ["render_props_pdf"]
