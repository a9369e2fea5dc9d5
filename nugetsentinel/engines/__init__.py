"""Scan pipeline engines — inventory, registry lookup, aggregation, reporting."""
