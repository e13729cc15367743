"""Configuration loading, defaults, hierarchy and schema validation."""
