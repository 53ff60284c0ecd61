"""Services Layer: orchestrates the pure core around the file-backed store."""
