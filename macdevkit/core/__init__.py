"""Core — models, configuration, dispatch engine and use cases."""
