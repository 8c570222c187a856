"""clipcheck: send clipboard Ruby code to an LLM and pretty-print the answer."""

__version__ = "0.1.0"
