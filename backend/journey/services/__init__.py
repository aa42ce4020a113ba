"""Progress aggregation and vocabulary review services."""
