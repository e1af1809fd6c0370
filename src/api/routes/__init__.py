"""Route modules of the GearRate API."""
