"""Configuration — user config file discovery, settings and logging."""
