"""id3cli - edit ID3 tags, cover art and lyrics of MP3 files."""

__version__ = "0.1.0"
