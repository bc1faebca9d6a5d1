"""Application layer: ports and exceptions."""
