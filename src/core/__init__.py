"""Core: domain models, errors, configuration and pipelines."""
