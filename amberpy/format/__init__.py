"""Source reindenting."""

from amberpy.format.runner import indent_line, run_format

__all__ = ["indent_line", "run_format"]
