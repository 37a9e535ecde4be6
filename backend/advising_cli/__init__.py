"""Typer command line for the advising assistant."""
