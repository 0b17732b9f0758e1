"""Configuration layer: TOML file, env vars, and CLI flags."""
