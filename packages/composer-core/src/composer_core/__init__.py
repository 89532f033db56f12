"""Server composer core: models, validation, selection rules and form transitions."""
