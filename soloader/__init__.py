"""Helpers for bionic errno and ctype tables, Android logging, 64-bit time,
EGL query answers, assets, settings and bionic-shaped I/O records."""

__version__ = "0.1.0"