"""Infrastructure layer: record I/O at the process boundary."""
