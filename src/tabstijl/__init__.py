"""
tabstijl: turn whitespace-separated command output into a styled table.

The pipeline has three stages:
- Tokenizer: split raw text into rows and cells under a delimiter policy
- Layout: substitute the header, measure columns and align cells
- Renderer: compose bordered, colored output lines

Example:
    from tabstijl import load_config, render_table, tokenize

    config = load_config(["--theme=matrix", "--padding=1"])
    grid = tokenize("name size\\nfoo 12\\n", config.delimiter, config.skip_first_line)
    print("\\n".join(render_table(grid, config)))
"""

from .config import RenderConfig, fold, load_config, parse_arguments, validate
from .exceptions import (
    ConfigurationError,
    InvalidNumberError,
    InvalidValueError,
    MissingValueError,
    TabstijlError,
    UnexpectedValueError,
    UnknownOptionError,
)
from .layout import TableLayout, align_text, build_layout, compute_column_widths
from .models import (
    Alignment,
    BorderEdge,
    BorderStyle,
    Cell,
    Color,
    Delimiter,
    Grid,
    Row,
    TextStyle,
)
from .styles import BORDER_STYLES, THEMES, ThemePreset, get_border_style, get_theme
from .tokenizer import Tokenizer, tokenize
from .visualization import ColorMode, render_table

__version__ = "0.0.1"

__all__ = [
    # Version
    "__version__",
    # Pipeline
    "Tokenizer",
    "tokenize",
    "TableLayout",
    "align_text",
    "build_layout",
    "compute_column_widths",
    "ColorMode",
    "render_table",
    # Configuration
    "RenderConfig",
    "load_config",
    "parse_arguments",
    "validate",
    "fold",
    # Models
    "Alignment",
    "BorderEdge",
    "BorderStyle",
    "Cell",
    "Color",
    "Delimiter",
    "Grid",
    "Row",
    "TextStyle",
    # Style catalog
    "BORDER_STYLES",
    "THEMES",
    "ThemePreset",
    "get_border_style",
    "get_theme",
    # Exceptions
    "TabstijlError",
    "ConfigurationError",
    "UnknownOptionError",
    "MissingValueError",
    "UnexpectedValueError",
    "InvalidValueError",
    "InvalidNumberError",
]
