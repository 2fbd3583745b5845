"""Configuration for pyhdiutil."""
