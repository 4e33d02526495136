"""Core utilities shared by the CLI, server and library code."""
