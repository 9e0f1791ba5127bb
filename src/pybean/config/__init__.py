"""PyBean configuration property models."""
