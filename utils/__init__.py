"""Console rendering and input validation helpers for the library demo."""
