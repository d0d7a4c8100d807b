"""Output rendering for outline results."""

from report.write import outline_payload, render_outline, write_outline

__all__ = ["outline_payload", "render_outline", "write_outline"]
