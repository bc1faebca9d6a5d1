"""HTTP surface for mesoplan."""
