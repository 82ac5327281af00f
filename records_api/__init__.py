"""Contact record manager: REST API plus a browser form over a record store."""
