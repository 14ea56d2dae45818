"""HTTP search surface for the OpenCode docs index."""
