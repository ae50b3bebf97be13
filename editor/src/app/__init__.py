"""Main window mixins: configuration and screen state transitions."""
