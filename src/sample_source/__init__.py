"""SampleSource event source: resource types and adapter runtime configuration."""

__version__ = "0.1.0"
