"""Shell runners — real process execution."""
