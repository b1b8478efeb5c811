"""Core configuration for clipath."""
