"""Dynasty - multi-team dynasty fantasy football trade calculator."""

__version__ = "0.1.0"
