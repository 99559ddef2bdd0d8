"""Classical text ciphers: Playfair, Vigenère, a bit cipher and a layered combination."""

__version__ = "0.1.0"
__all__ = ["bmp", "playfair", "cli"]