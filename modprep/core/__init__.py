"""Template instantiation pipeline."""
