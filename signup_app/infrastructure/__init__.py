"""Infrastructure layer: outbound HTTP clients."""
