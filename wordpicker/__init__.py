"""wordpicker: pick vocabulary words and phrases out of pasted articles."""

__version__ = "0.1.0"
