"""Runtime configuration, logging, errors and frame driving."""
