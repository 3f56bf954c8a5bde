"""Feature packages implementing tag editing behaviour."""
