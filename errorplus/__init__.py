"""Exceptions with a cause, captured call traces, tags, severity and configurable verbose reports."""

__version__ = "0.0.1"