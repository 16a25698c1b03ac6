"""Command line entry point for the sensor statistics report."""
