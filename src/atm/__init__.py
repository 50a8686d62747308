"""Transaction core of a single automated teller terminal."""
