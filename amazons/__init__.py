"""The Game of the Amazons: rules engine, AI players, external bot driver, saves and a text interface."""

__version__ = "1.0.0"