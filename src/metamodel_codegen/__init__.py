"""Go declaration generator for protocol meta-models."""
