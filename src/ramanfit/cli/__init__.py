"""Command line interface for RamanFit."""
