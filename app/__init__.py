"""Hello Humans greeting service."""
