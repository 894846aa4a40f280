"""create-nodality -- scaffolds a ready-to-run Nodality project."""

__version__ = "1.0.0"
