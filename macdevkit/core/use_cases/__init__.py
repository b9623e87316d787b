"""Use cases — flows the CLI drives."""
