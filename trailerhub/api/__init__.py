"""TrailerHub REST API."""
