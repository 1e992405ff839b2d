"""Core engine components: PathEngine, matrix input parsing and result types."""
