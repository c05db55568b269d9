"""Note workflows shared by CLI commands."""
