"""CLI display implementations."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .tables import print_diff_table, print_files_table, print_search_table

__all__ = ["CLIDisplay", "Display", "print_diff_table", "print_files_table", "print_search_table"]
