from unnest.printer.css import to_css

__all__ = ["to_css"]
