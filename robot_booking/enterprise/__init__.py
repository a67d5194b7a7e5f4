"""Enterprise-grade building blocks: configuration and domain core."""
