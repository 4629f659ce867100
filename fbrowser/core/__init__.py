"""Core Qt plumbing shared by the models."""
