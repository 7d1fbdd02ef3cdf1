"""Media upload feature: validation, storage, export and statistics."""
