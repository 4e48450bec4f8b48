"""Adapters connecting the domain to the controller and to record files."""
