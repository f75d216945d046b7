"""Pure Hangul composition logic. No I/O beyond optional YAML layout files."""
