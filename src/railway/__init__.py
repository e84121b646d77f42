"""railway: track graphs, train routes and route intersection checks."""

__version__ = "0.1.0"
