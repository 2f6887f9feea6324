"""Travel map clustering and data loading for WanderSphere."""
