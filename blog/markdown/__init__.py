from .excerpt import generate_excerpt
from .renderer import render_markdown
from .toc_extractor import build_table_of_contents, extract_headings

__all__ = (
    "build_table_of_contents",
    "extract_headings",
    "generate_excerpt",
    "render_markdown",
)
