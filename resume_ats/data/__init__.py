"""Data layer: result models exchanged with external collaborators."""
