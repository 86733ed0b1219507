"""Configuration, errors and output documents."""
