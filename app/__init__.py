"""Console frontend."""
