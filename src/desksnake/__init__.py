"""Snake played with bitmap icons in a desktop folder."""
