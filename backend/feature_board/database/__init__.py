"""MongoDB access layer."""
