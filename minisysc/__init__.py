"""A minimal discrete-event simulation kernel with SystemC-style time, events, modules and payloads."""

__version__ = "0.1.0"