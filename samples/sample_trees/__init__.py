"""Tree-shaped samples reached through collections of themselves."""
