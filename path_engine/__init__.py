"""All-pairs shortest paths (Floyd-Warshall) with per-round snapshots and path reconstruction."""
