"""classdeps infrastructure layer: class file reading, analyzers, providers."""
