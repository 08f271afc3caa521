"""Application layer: ports and use cases around the level registry."""
