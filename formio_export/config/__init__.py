"""Export configuration."""
