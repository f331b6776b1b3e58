"""User-facing interfaces for pagelingo."""
