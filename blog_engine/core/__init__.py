"""Core domain logic: exceptions and the markdown pipeline."""
