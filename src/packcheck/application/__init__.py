"""Application layer: discovery, checks, orchestration and reporting."""
