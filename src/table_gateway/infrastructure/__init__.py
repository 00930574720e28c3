"""Infrastructure layer: SQL synthesis and result shaping."""
