"""Hero Squad Optimizer - party vs encounter analysis backend."""
