"""Demo service serving randomly generated weather forecasts."""

__version__ = "1.0.0"
