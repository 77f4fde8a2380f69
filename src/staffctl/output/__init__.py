"""Output layer — Rich tables and JSON formatting for ServiceResult."""
