"""Paint Damage Risk Analyzer service."""
