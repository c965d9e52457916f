"""classdeps presentation layer: pytest integration."""
