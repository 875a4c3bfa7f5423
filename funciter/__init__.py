"""Lazy, chainable iterators and sequences with Option and Result types."""

__version__ = "0.1.0"