# Marker stored in the next-hop matrix when no path is known yet
UNREACHABLE = -1

# Textual marker for a missing edge in matrix input and rendered output
INFINITY_TOKEN = 'inf'

# Upper bound on vertices accepted by the engine (snapshots alone are O(N^3))
DEFAULT_MAX_VERTICES = 500
