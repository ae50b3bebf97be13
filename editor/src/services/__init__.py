"""Editor services: hit testing, drag tracking and grid generation."""
