"""Board state, drag events and the reorder engine."""
