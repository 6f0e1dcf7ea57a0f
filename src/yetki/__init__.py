"""yetki - permission resolution and time-bounded access grants."""

__version__ = "0.1.0"
