"""Single-page artist portfolio built from a static catalog."""
