"""Console boundary: player count input and result reporting."""
