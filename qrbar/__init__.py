"""Text to QR code converter with a persisted, searchable history."""
