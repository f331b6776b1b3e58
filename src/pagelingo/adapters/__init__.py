"""Adapters binding the localizer to concrete build pipelines."""
