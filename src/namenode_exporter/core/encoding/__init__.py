"""Encoders for metric exposition and log output."""
