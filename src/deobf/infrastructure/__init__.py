"""Infrastructure layer — type-resolution contexts for proxy ordering."""
