"""CLI package for clockify-bulk."""
