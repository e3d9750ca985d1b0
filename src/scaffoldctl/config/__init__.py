"""Settings models, TOML discovery and logging setup."""
