"""Language server offering gradle.properties key completion."""

__version__ = "0.1.0"
