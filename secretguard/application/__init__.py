"""Application layer: authorization and rotation use cases."""
