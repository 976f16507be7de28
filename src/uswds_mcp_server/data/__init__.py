"""Static USWDS reference data backing the domain services."""
