"""Low-level toolkit for the Telegram Bot API: requests, encoders, a client,
interceptors, text formatting and reactions."""

__version__ = "0.1.0"