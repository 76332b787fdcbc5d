"""HTTP types — immutable request, response, headers and parameters."""
