from tokman.formatters.css import format_css, format_scss
from tokman.formatters.json_formatter import format_json, render_json
from tokman.formatters.values import to_css_value, to_json_value
from tokman.formatters.writer import render, write_output

__all__ = [
    "format_css",
    "format_scss",
    "format_json",
    "render_json",
    "to_css_value",
    "to_json_value",
    "render",
    "write_output",
]
