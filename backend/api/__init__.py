"""HTTP surface for the Balagh email backend."""
