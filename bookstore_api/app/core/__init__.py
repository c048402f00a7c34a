"""Configuration, logging and error helpers shared across the app."""
