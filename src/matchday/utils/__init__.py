"""Runtime utilities for matchday."""
