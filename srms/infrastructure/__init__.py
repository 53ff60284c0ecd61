"""Infrastructure Layer: file IO and logging setup. The only layer that touches the disk."""
