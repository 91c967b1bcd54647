"""Desktop app for the pixel buffer demo."""
