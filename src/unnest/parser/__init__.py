from unnest.parser.errors import ParseError
from unnest.parser.transformer import parse_css

__all__ = ["ParseError", "parse_css"]
