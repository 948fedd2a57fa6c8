"""lcgen command-line interface."""
