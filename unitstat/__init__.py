"""Point-in-time statistics of systemd units collected over D-Bus."""

__version__ = '0.1.0'
