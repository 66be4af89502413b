"""Command implementations (imperative shell around the domain core)."""
