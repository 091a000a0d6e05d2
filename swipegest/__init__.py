"""Map multi-touch gestures to configured desktop window actions, with feedback animations."""

__version__ = "0.1.0"