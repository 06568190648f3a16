"""Example generators built from elmish_random."""
