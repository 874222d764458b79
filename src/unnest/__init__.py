"""css-unnest: flatten nested style sheets into plain, non-nested rules."""

__version__ = "0.1.0"

from unnest.model.nodes import AtRule, Declaration, MarkerStatement, Node, StyleRule  # noqa: E402
from unnest.parser import ParseError, parse_css  # noqa: E402
from unnest.printer import to_css  # noqa: E402
from unnest.transforms.nesting import flatten_nesting  # noqa: E402

__all__ = [
    "__version__",
    "AtRule",
    "Declaration",
    "MarkerStatement",
    "Node",
    "StyleRule",
    "ParseError",
    "parse_css",
    "to_css",
    "flatten_nesting",
]
