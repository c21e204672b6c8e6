"""Readers for command output and structured files."""
