"""Configuration — settings file and environment overrides."""
