"""Core types, date handling and configuration."""
