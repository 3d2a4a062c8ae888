"""Board backend - CRUD service for message-board posts."""
