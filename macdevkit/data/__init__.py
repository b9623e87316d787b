"""
Packaged data directory.

A release build places the full automation script here as ``init.sh``.
When it is absent, the script resolver writes the minimal fallback
script instead.
"""
