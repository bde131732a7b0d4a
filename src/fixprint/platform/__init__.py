"""Platform adapters: logging and process signal handling."""
