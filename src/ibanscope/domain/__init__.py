"""Domain layer of ibanscope."""
