"""Command line tooling for the card deck library."""
