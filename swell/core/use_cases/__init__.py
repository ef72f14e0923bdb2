"""Use-cases combine domain rules with storage and external services."""
