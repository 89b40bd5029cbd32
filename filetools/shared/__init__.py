"""Configuration and progress helpers shared across filetools modules."""
