"""Configuration package (static settings, environment overrides)."""
