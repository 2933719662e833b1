"""
Live streaming domain logic.

Includes:
- stream: Broadcast lifecycle (start, stop, recordings as videos).
- network: Viewer network-quality gate.
"""
