"""clockify-bulk - Bulk-create Clockify time entries for every working day
of a month."""

__version__ = "1.0.0"

from clockify_bulk.cli.app import main

__all__ = ["main"]
