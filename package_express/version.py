"""Package Express calculator version, stamped on batch output."""

VERSION = "2025.01.0"
