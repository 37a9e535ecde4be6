"""ABCU advising assistant backend packages."""
