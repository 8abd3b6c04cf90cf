"""Configuration, logging, errors, datasets and the query engine."""
