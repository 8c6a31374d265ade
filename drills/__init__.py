"""Reference solutions to Rust exercises, a rust-analyzer project writer and status-line helpers."""

__version__ = "0.1.0"