"""Filesystem helpers shared by the orchestrator and the CLI."""
