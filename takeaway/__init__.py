"""Interactive takeaway ordering assistant."""
