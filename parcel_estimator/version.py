"""Calculator version, stamped on every priced row."""

VERSION = "2026.10.1"
