"""Application plumbing: XDG paths, configuration file and CLI theme."""
