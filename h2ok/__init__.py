"""H2Ok map client: filter-driven map synchronization for water refill partners."""

__version__ = "0.1.0"
