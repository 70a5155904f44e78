"""Configuration, logging, error taxonomy and the record store."""
