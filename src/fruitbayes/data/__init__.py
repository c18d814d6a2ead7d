"""Training data and class table I/O."""
