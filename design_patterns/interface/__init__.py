"""Interface layer - the demonstration surface exposed to the CLI."""
