"""Parameter shaping and reconciliation helpers for the BTP Terraform provider."""

__version__ = "0.1.0"
