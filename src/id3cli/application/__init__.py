"""Application services coordinating feature use cases."""
