"""Code shared by hook senders and receivers."""
