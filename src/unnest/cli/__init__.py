from unnest.cli.main import cli

__all__ = ["cli"]
