"""Project-relative names shared by the CLI and config loader."""

CONFIG = "config.toml"
OUTPUT = "output"

EXPORT_PREFIX = "glyphseed"

PALETTE_ENV = "GLYPHSEED_PALETTE"
