"""Engine — section dispatch."""
