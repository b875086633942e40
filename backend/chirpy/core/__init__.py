"""Cross-cutting Flask wiring: config, logging, errors, CORS and extensions."""
