"""Library browsing, regex search, tag filters, selection and play-queue logic for a music client."""

__version__ = "0.1.0"
__all__ = ["models", "queue_view", "filters", "selection", "search", "library"]